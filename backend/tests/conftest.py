"""Shared test configuration and fixtures."""

import pytest


SAMPLE_RESUME = """Jane Roe
jane.roe@email.com

Summary
Backend engineer with 6 years of experience.

Experience
Senior Engineer | Acme | 2020 - Present
- Built Python services handling 10x traffic growth
- Maintained Redis caches for the checkout flow
- Reduced Docker image size by 40%

Skills
Python, Redis, Docker, Kubernetes, GraphQL
"""

SAMPLE_JD = """Senior Backend Engineer

Responsibilities:
- Operate Terraform modules and Redis clusters
- Own the on-call rotation for the payments platform and keep the lights on

Requirements:
- Python is required
- Must have Docker and Kubernetes experience

About us: we are a small group building reconciliation software for finance operations worldwide.

Nice to have: Figma.
"""


@pytest.fixture
def sample_resume() -> str:
    return SAMPLE_RESUME


@pytest.fixture
def sample_jd() -> str:
    return SAMPLE_JD
