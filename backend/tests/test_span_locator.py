from services.span_locator import locate, locate_in_resume


RESUME = """Jane Roe

Experience
- Built APIs in Go
- Scaled Redis clusters

Skills
Python, Redis, Kubernetes
"""


def test_locate_first_occurrence():
    text = "Used postgresql daily. PostgreSQL again"
    span = locate("PostgreSQL", text)
    assert span is not None
    assert span.text == "postgresql"
    assert (span.start, span.end) == (5, 15)
    assert text[span.start:span.end] == span.text


def test_locate_missing_keyword():
    assert locate("Rust", "Python only") is None


def test_locate_symbol_keyword():
    span = locate("C++", "Strong C++ skills")
    assert span is not None
    assert span.start == 7
    assert span.end == 10


def test_locate_synthetic_experience_keyword_without_literal_text():
    assert locate("5+ years", "5 years of experience") is None
    assert locate("5+ years", "5+ years of experience") is not None


def test_locate_in_resume_resolves_section_and_index():
    span = locate_in_resume("Kubernetes", RESUME)
    assert span is not None
    assert span.section == "skills"
    assert span.index == 0

    redis = locate_in_resume("Redis", RESUME)
    assert redis is not None
    assert redis.section == "experience"
    assert redis.index == 1
    assert RESUME[redis.start:redis.end] == "Redis"


def test_locate_in_resume_defaults_outside_sections():
    text = "Python Developer\n\nExperience\n- Maintained systems"
    span = locate_in_resume("Python", text)
    assert span is not None
    assert (span.section, span.index) == ("skills", 0)


def test_locate_in_resume_missing():
    assert locate_in_resume("Rust", RESUME) is None
