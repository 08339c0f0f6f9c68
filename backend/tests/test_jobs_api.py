from fastapi import status

from payloads import job_payload


def test_create_job_sets_owner_from_session(employer):
    client, user = employer

    response = client.post("/api/jobs", json=job_payload(employerId=9999))

    assert response.status_code == status.HTTP_201_CREATED
    job = response.json()
    assert job["employerId"] == user["id"]
    assert job["title"] == "React Developer"
    assert job["skills"] == ["React", "TypeScript"]
    assert job["createdAt"]


def test_worker_cannot_create_job(worker):
    client, _ = worker

    response = client.post("/api/jobs", json={})

    assert response.status_code == status.HTTP_403_FORBIDDEN
    assert response.json() == {"message": "Only employers can create job postings"}


def test_create_job_requires_session(test_client):
    response = test_client.post("/api/jobs", json=job_payload())

    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_create_job_validation(employer):
    client, _ = employer

    response = client.post(
        "/api/jobs", json=job_payload(title="Dev", description="Too short", skills=[])
    )

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    failed = {error["loc"][-1] for error in response.json()["errors"]}
    assert {"title", "description", "skills"} <= failed


def test_list_and_get_jobs_publicly(posted_job, test_client):
    listed = test_client.get("/api/jobs")
    fetched = test_client.get(f"/api/jobs/{posted_job['id']}")

    assert listed.status_code == status.HTTP_200_OK
    assert listed.json() == [posted_job]
    assert fetched.json() == posted_job


def test_get_missing_job(test_client):
    response = test_client.get("/api/jobs/999")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"message": "Job posting not found"}


def test_get_job_bad_id(test_client):
    assert test_client.get("/api/jobs/abc").status_code == status.HTTP_400_BAD_REQUEST


def test_search_jobs(employer, test_client):
    client, _ = employer
    client.post("/api/jobs", json=job_payload(title="React Developer", skills=["React"]))
    client.post(
        "/api/jobs",
        json=job_payload(title="Data Engineer", company="Datacorp", skills=["Python", "Spark"]),
    )

    by_skill = test_client.get("/api/jobs", params={"q": "spark"}).json()
    by_company = test_client.get("/api/jobs", params={"q": "DATACORP"}).json()
    blank = test_client.get("/api/jobs", params={"q": "  "}).json()

    assert [job["title"] for job in by_skill] == ["Data Engineer"]
    assert [job["title"] for job in by_company] == ["Data Engineer"]
    assert len(blank) == 2


def test_my_postings_and_employer_listing(employer, other_employer, test_client):
    client, user = employer
    other_client, other_user = other_employer
    client.post("/api/jobs", json=job_payload(title="First posting"))
    other_client.post("/api/jobs", json=job_payload(title="Someone else's"))
    client.post("/api/jobs", json=job_payload(title="Second posting"))

    mine = client.get("/api/jobs/my-postings")
    public = test_client.get(f"/api/jobs/employer/{user['id']}")

    assert mine.status_code == status.HTTP_200_OK
    assert [job["title"] for job in mine.json()] == ["First posting", "Second posting"]
    assert public.json() == mine.json()
    assert test_client.get("/api/jobs/employer/999").json() == []


def test_worker_cannot_list_my_postings(worker):
    client, _ = worker

    response = client.get("/api/jobs/my-postings")

    assert response.status_code == status.HTTP_403_FORBIDDEN
    assert response.json() == {"message": "Only employers can access their job postings"}


def test_update_job(employer, posted_job):
    client, _ = employer

    response = client.patch(
        f"/api/jobs/{posted_job['id']}", json={"rate": "$60/hr", "employerId": 999}
    )

    assert response.status_code == status.HTTP_200_OK
    job = response.json()
    assert job["rate"] == "$60/hr"
    assert job["title"] == posted_job["title"]
    assert job["employerId"] == posted_job["employerId"]
    assert job["createdAt"] == posted_job["createdAt"]


def test_update_job_by_other_employer(other_employer, posted_job):
    client, _ = other_employer

    response = client.patch(f"/api/jobs/{posted_job['id']}", json={"rate": "$1"})

    assert response.status_code == status.HTTP_403_FORBIDDEN
    assert response.json() == {"message": "You do not have permission to update this job posting"}


def test_update_job_rejects_null_required_field(employer, posted_job):
    client, _ = employer

    response = client.patch(f"/api/jobs/{posted_job['id']}", json={"description": None})

    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_update_missing_job(employer):
    client, _ = employer

    response = client.patch("/api/jobs/999", json={"rate": "$1"})

    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_delete_job(employer, posted_job, test_client):
    client, _ = employer

    response = client.delete(f"/api/jobs/{posted_job['id']}")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"message": "Job posting deleted successfully"}
    assert test_client.get(f"/api/jobs/{posted_job['id']}").status_code == status.HTTP_404_NOT_FOUND
    assert client.delete(f"/api/jobs/{posted_job['id']}").status_code == status.HTTP_404_NOT_FOUND


def test_delete_job_permissions(worker, other_employer, posted_job):
    worker_client, _ = worker
    other_client, _ = other_employer

    assert worker_client.delete(f"/api/jobs/{posted_job['id']}").status_code == status.HTTP_403_FORBIDDEN
    assert other_client.delete(f"/api/jobs/{posted_job['id']}").status_code == status.HTTP_403_FORBIDDEN


def test_job_ids_are_not_reused_after_delete(employer, posted_job):
    client, _ = employer
    client.delete(f"/api/jobs/{posted_job['id']}")

    replacement = client.post("/api/jobs", json=job_payload()).json()

    assert replacement["id"] > posted_job["id"]
