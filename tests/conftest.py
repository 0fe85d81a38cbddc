"""
Shared resume fixtures.
"""
import pytest

from app.models.resume_models import (
    Certification,
    Education,
    Experience,
    PersonalInfo,
    Project,
    ResumeData,
    SkillCategory,
)


@pytest.fixture
def empty_resume():
    return ResumeData()


@pytest.fixture
def scenario_resume():
    """One role with two short plain responsibilities, one complete degree, no skills or projects."""
    return ResumeData(
        personal_info=PersonalInfo(
            full_name="Jane Smith",
            email="jane@example.com",
            phone="555-123-4567",
        ),
        education=[
            Education(
                institution="State University",
                degree="BSc",
                field="Biology",
                start_date="2015",
                end_date="2019",
            )
        ],
        experience=[
            Experience(
                company="Acme",
                position="Clerk",
                location="Springfield",
                start_date="2019",
                end_date="2021",
                responsibilities=[
                    "Sorted paperwork for the office",
                    "Answered phones for the team",
                ],
            )
        ],
    )


@pytest.fixture
def strong_resume():
    """Fully populated resume with consistent dates and action-verb bullets."""
    return ResumeData(
        personal_info=PersonalInfo(
            full_name="Alex Rivera",
            email="alex.rivera@example.com",
            phone="+1 (555) 987-6543",
            location="Austin, TX",
            linkedin="linkedin.com/in/alexrivera",
            github="github.com/alexrivera",
        ),
        education=[
            Education(
                institution="University of Texas",
                degree="BS",
                field="Computer Science",
                start_date="Aug 2012",
                end_date="May 2016",
                gpa="3.8",
            )
        ],
        experience=[
            Experience(
                company="Cloudline",
                position="Senior Backend Engineer",
                location="Austin, TX",
                start_date="Jan 2021",
                end_date="Present",
                current=True,
                responsibilities=[
                    "Architected event-driven microservices on Kubernetes serving 2M daily requests",
                    "Led a team of five engineers through a zero-downtime database migration",
                ],
                achievements=[
                    "Reduced p99 API latency by 45% through query optimization and caching",
                ],
            ),
            Experience(
                company="Datapoint",
                position="Software Engineer",
                location="Dallas, TX",
                start_date="Jun 2018",
                end_date="Dec 2020",
                responsibilities=[
                    "Built Python ETL pipelines that processed 500k records every night",
                    "Automated deployment with Docker and CI/CD, cutting release time in half",
                ],
                achievements=[
                    "Increased test coverage from 40% to 85% across four core services",
                ],
            ),
            Experience(
                company="Webfoundry",
                position="Junior Developer",
                location="Remote",
                start_date="Jul 2016",
                end_date="May 2018",
                responsibilities=[
                    "Developed React dashboards used by 30 internal analysts every single day",
                ],
                achievements=[
                    "Delivered a customer portal two weeks ahead of the agreed schedule",
                ],
            ),
        ],
        projects=[
            Project(
                title="Budget Buddy",
                description="A budgeting app that tracks household spending and forecasts monthly savings goals",
                technologies=["React", "Node.js", "PostgreSQL"],
                highlights=[
                    "Designed a forecasting model with 92% accuracy on held-out data",
                    "Launched to 1,200 users within the first month",
                ],
                github="github.com/alexrivera/budget-buddy",
            ),
            Project(
                title="Trail Finder",
                description="A mobile-friendly web app that recommends hiking trails using weather and difficulty data",
                technologies=["Vue", "Python", "AWS"],
                highlights=[
                    "Integrated three public weather APIs behind a single cached endpoint",
                    "Scaled the backend to 10k monthly users on a serverless stack",
                ],
                link="trailfinder.example.com",
            ),
        ],
        skills=[
            SkillCategory(category="Languages", items=["Python", "TypeScript", "SQL", "Go"]),
            SkillCategory(category="Frameworks", items=["FastAPI", "React", "Vue"]),
            SkillCategory(category="Tools", items=["Docker", "Kubernetes", "AWS", "Terraform"]),
        ],
        certifications=[
            Certification(name="AWS Certified Developer", issuer="Amazon", date="2022"),
        ],
    )
