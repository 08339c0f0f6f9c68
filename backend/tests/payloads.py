"""Request bodies shared by the API tests, in wire (camelCase) form."""

PASSWORD = "secret123"


def worker_profile_payload(**overrides) -> dict:
    return {
        "title": "Web Developer",
        "skills": ["React", "Node.js"],
        "experience": "5 years of full-stack work",
        "hourlyRate": 45,
        "availability": "Immediate",
        "location": "Remote",
        **overrides,
    }


def employer_profile_payload(**overrides) -> dict:
    return {
        "companyName": "Acme Corp",
        "companySize": "11-50",
        "industry": "Technology",
        "companyDescription": "We build things",
        "location": "Remote",
        **overrides,
    }


def job_payload(**overrides) -> dict:
    return {
        "title": "React Developer",
        "company": "Acme Corp",
        "location": "Remote",
        "rate": "$40-50/hr",
        "type": "Contract",
        "duration": "3 months",
        "skills": ["React", "TypeScript"],
        "description": "Build and maintain our customer facing dashboard.",
        **overrides,
    }


# Store-level fields (snake_case), used when talking to collections directly


def user_fields(username: str, user_type: str = "worker") -> dict:
    return {
        "username": username,
        "password": "not-a-real-hash",
        "email": f"{username}@example.com",
        "name": username.title(),
        "user_type": user_type,
    }


def job_fields(employer_id: int, **overrides) -> dict:
    return {
        "employer_id": employer_id,
        "title": "React Developer",
        "company": "Acme Corp",
        "location": "Remote",
        "rate": "$40/hr",
        "type": "Contract",
        "skills": ["React"],
        "description": "Build and maintain our customer facing dashboard.",
        **overrides,
    }
