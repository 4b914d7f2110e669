"""Shared fixtures: a sample resume and a deterministic width function."""

import pytest

SAMPLE_RESUME = """
Senior Software Engineer

Jane Doe
jane.doe@example.com
+1 (430) 555 0100
San Antonio, TX, USA
linkedin.com/in/janedoe

Summary:

Senior Software Engineer with 10 years of experience delivering scalable SaaS platforms using **Python**, **Go** and Kubernetes across finance, retail and education.

Professional Experience:

Senior Software Engineer at Softcom: 06/2022 - Current
• Built **Redis** caching for the billing service, cutting p95 latency by 40% across all tenant regions.
• Led the migration of a legacy monolith into independent services deployed on Kubernetes.

Software Engineer at Rover: 03/2020 – 09/2022
• Designed booking and payment APIs integrated with Stripe and secured with OAuth 2.0.

Skills:
· Languages: Python, Go, TypeScript, SQL
· Cloud: AWS, Azure, Kubernetes, Terraform

Education:
B.S. Computer Science, University of Texas
"""


def char_measure(text: str, font_name: str, size: float) -> float:
    """Fixed advance per character; bold faces are wider."""
    per_char = 0.6 if "Bold" in font_name else 0.5
    return len(text) * size * per_char


@pytest.fixture
def sample_resume():
    return SAMPLE_RESUME


@pytest.fixture
def measure():
    return char_measure


def make_resume(body: str, name: str = "Jane Doe") -> str:
    """Six-line preamble followed by ``body``."""
    return "\n".join([
        "Senior Software Engineer",
        name,
        "jane.doe@example.com",
        "+1 555 0100",
        "Austin, TX",
        "linkedin.com/in/janedoe",
        "",
        body,
    ])


@pytest.fixture
def resume_factory():
    return make_resume
