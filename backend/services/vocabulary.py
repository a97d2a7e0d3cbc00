"""Fixed skill vocabulary recognised by the fit map rules engine.

Terms are stored in their canonical spelling; matching is
case-insensitive, and every match is reported with the spelling below.
"""

from types import MappingProxyType

LANGUAGES: tuple[str, ...] = (
    "JavaScript", "TypeScript", "Python", "Java", "C++", "C#", "Go", "Rust",
    "Ruby", "PHP", "Swift", "Kotlin", "Scala", "R", "MATLAB", "SQL",
)

FRAMEWORKS: tuple[str, ...] = (
    "React", "Vue", "Angular", "Next.js", "Node.js", "Express", "Django",
    "Flask", "Spring", "Rails", "Laravel", "ASP.NET", "FastAPI", "NestJS",
)

DATABASES: tuple[str, ...] = (
    "PostgreSQL", "MySQL", "MongoDB", "Redis", "Elasticsearch", "DynamoDB",
    "Cassandra", "Oracle", "SQL Server", "MariaDB", "Neo4j", "Couchbase",
)

CLOUD_DEVOPS: tuple[str, ...] = (
    "AWS", "Azure", "GCP", "Docker", "Kubernetes", "Terraform", "Ansible",
    "Jenkins", "CircleCI", "GitLab CI", "GitHub Actions", "CloudFormation",
)

TOOLS: tuple[str, ...] = (
    "Git", "GitHub", "GitLab", "Jira", "Confluence", "Slack", "Figma",
    "VS Code", "IntelliJ", "Postman", "Grafana", "Prometheus", "Datadog",
)

CONCEPTS: tuple[str, ...] = (
    "API", "REST", "GraphQL", "gRPC", "microservices", "serverless",
    "CI/CD", "DevOps", "Agile", "Scrum", "TDD", "BDD", "DDD",
    "machine learning", "deep learning", "data science", "analytics",
)

VOCABULARY = MappingProxyType({
    "languages": LANGUAGES,
    "frameworks": FRAMEWORKS,
    "databases": DATABASES,
    "cloud_devops": CLOUD_DEVOPS,
    "tools": TOOLS,
    "concepts": CONCEPTS,
})

ALL_KEYWORDS: tuple[str, ...] = tuple(
    term for terms in VOCABULARY.values() for term in terms
)


def category_of(keyword: str) -> str | None:
    """Return the vocabulary category a canonical keyword belongs to."""
    for category, terms in VOCABULARY.items():
        if keyword in terms:
            return category
    return None
