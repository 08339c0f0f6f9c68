"""
Demo dataset: four workers, four employers and four job postings.

Every sample account uses the password ``password``.
"""

import logging

from workconnect.records import UserType
from workconnect.services.marketplace import MarketplaceService
from workconnect.store import Store

logger = logging.getLogger(__name__)

SAMPLE_PASSWORD = "password"

SAMPLE_WORKERS = [
    {
        "user": {"username": "worker1", "email": "worker1@example.com", "name": "Sarah Johnson"},
        "profile": {
            "title": "Graphic Designer",
            "skills": ["Adobe Photoshop", "Illustrator", "UI/UX"],
            "experience": "7 years of experience in graphic design and UI/UX",
            "hourly_rate": 35,
            "availability": "Immediate",
            "location": "New York, NY",
            "image": "https://images.unsplash.com/photo-1494790108377-be9c29b29330?ixlib=rb-1.2.1&auto=format&fit=crop&w=150&h=150&q=80",
        },
        "rating": 4.8,
        "review_count": 24,
    },
    {
        "user": {"username": "worker2", "email": "worker2@example.com", "name": "Michael Chen"},
        "profile": {
            "title": "Web Developer",
            "skills": ["React", "Node.js", "MongoDB"],
            "experience": "5 years of full-stack development experience",
            "hourly_rate": 45,
            "availability": "2 weeks",
            "location": "San Francisco, CA",
            "image": "https://images.unsplash.com/photo-1507003211169-0a1dd7228f2d?ixlib=rb-1.2.1&auto=format&fit=crop&w=150&h=150&q=80",
        },
        "rating": 4.9,
        "review_count": 31,
    },
    {
        "user": {"username": "worker3", "email": "worker3@example.com", "name": "Emily Rodriguez"},
        "profile": {
            "title": "Content Writer",
            "skills": ["SEO", "Blogging", "Copywriting"],
            "experience": "4 years of content creation for tech companies",
            "hourly_rate": 28,
            "availability": "Immediate",
            "location": "Chicago, IL",
            "image": "https://images.unsplash.com/photo-1573497019940-1c28c88b4f3e?ixlib=rb-1.2.1&auto=format&fit=crop&w=150&h=150&q=80",
        },
        "rating": 4.6,
        "review_count": 17,
    },
    {
        "user": {"username": "worker4", "email": "worker4@example.com", "name": "James Wilson"},
        "profile": {
            "title": "Data Analyst",
            "skills": ["Python", "SQL", "Tableau"],
            "experience": "6 years in data analysis and visualization",
            "hourly_rate": 40,
            "availability": "1 week",
            "location": "Austin, TX",
            "image": "https://images.unsplash.com/photo-1500648767791-00dcc994a43e?ixlib=rb-1.2.1&auto=format&fit=crop&w=150&h=150&q=80",
        },
        "rating": 4.7,
        "review_count": 22,
    },
]

SAMPLE_EMPLOYERS = [
    {
        "user": {"username": "employer1", "email": "employer1@example.com", "name": "TechSolutions Inc."},
        "profile": {
            "company_name": "TechSolutions Inc.",
            "company_size": "51-200",
            "industry": "Technology",
            "company_description": "Leading provider of innovative software solutions",
            "location": "Remote",
        },
        "job": {
            "title": "Front-end Developer Needed",
            "company": "TechSolutions Inc.",
            "location": "Remote",
            "rate": "$40-50/hr",
            "type": "Contract",
            "duration": "3 months",
            "skills": ["JavaScript", "React", "CSS"],
            "description": (
                "Looking for an experienced front-end developer to help build a new web "
                "application. The ideal candidate should have strong expertise in React and "
                "modern CSS frameworks."
            ),
        },
    },
    {
        "user": {"username": "employer2", "email": "employer2@example.com", "name": "Creative Studios"},
        "profile": {
            "company_name": "Creative Studios",
            "company_size": "11-50",
            "industry": "Design",
            "company_description": "Award-winning design agency",
            "location": "New York, NY",
        },
        "job": {
            "title": "Graphic Designer for Brand Refresh",
            "company": "Creative Studios",
            "location": "New York, NY",
            "rate": "$35-45/hr",
            "type": "Part-time",
            "duration": "2 months",
            "skills": ["Adobe Creative Suite", "Branding", "Typography"],
            "description": (
                "Our agency is seeking a talented graphic designer to assist with a complete "
                "brand refresh for one of our major clients. Must have strong typography skills "
                "and branding experience."
            ),
        },
    },
    {
        "user": {"username": "employer3", "email": "employer3@example.com", "name": "Future Technologies"},
        "profile": {
            "company_name": "Future Technologies",
            "company_size": "11-50",
            "industry": "Technology",
            "company_description": "Emerging tech company focused on innovation",
            "location": "Remote",
        },
        "job": {
            "title": "Content Writer for Tech Blog",
            "company": "Future Technologies",
            "location": "Remote",
            "rate": "$25-35/hr",
            "type": "Freelance",
            "duration": "Ongoing",
            "skills": ["SEO Writing", "Technical Knowledge", "Research"],
            "description": (
                "We need a skilled content writer who can produce engaging articles about "
                "emerging technologies. The ideal candidate should have SEO knowledge and be "
                "able to explain complex technical concepts in an accessible way."
            ),
        },
    },
    {
        "user": {"username": "employer4", "email": "employer4@example.com", "name": "Global Brands"},
        "profile": {
            "company_name": "Global Brands",
            "company_size": "201-500",
            "industry": "Marketing",
            "company_description": "International marketing and branding company",
            "location": "Chicago, IL",
        },
        "job": {
            "title": "Social Media Manager",
            "company": "Global Brands",
            "location": "Chicago, IL",
            "rate": "$30-40/hr",
            "type": "Full-time",
            "duration": "Permanent",
            "skills": ["Social Media Strategy", "Content Creation", "Analytics"],
            "description": (
                "Seeking an experienced social media manager to oversee our brand presence "
                "across multiple platforms. Responsibilities include content creation, community "
                "management, and performance analysis."
            ),
        },
    },
]


def seed_sample_data(store: Store) -> bool:
    """
    Load the demo dataset into ``store``.

    Returns False without touching anything when the store already has users.
    """
    if store.users.list():
        logger.info("Store already holds users, skipping sample data")
        return False

    service = MarketplaceService(store)

    for sample in SAMPLE_WORKERS:
        worker = service.register(
            {**sample["user"], "password": SAMPLE_PASSWORD, "user_type": UserType.WORKER}
        )
        profile = service.create_worker_profile(worker, sample["profile"])
        # Ratings have no public write path
        store.worker_profiles.update(
            profile.id, {"rating": sample["rating"], "review_count": sample["review_count"]}
        )

    for sample in SAMPLE_EMPLOYERS:
        employer = service.register(
            {**sample["user"], "password": SAMPLE_PASSWORD, "user_type": UserType.EMPLOYER}
        )
        service.create_employer_profile(employer, sample["profile"])
        service.create_job(employer, sample["job"])

    logger.info(
        "Loaded sample data: %d workers, %d employers",
        len(SAMPLE_WORKERS),
        len(SAMPLE_EMPLOYERS),
    )
    return True
