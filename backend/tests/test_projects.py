from fastapi import status


def create_project(client, headers, **overrides):
    payload = {"name": "Test Project", "description": "About it"}
    payload.update(overrides)
    return client.post("/api/projects", json=payload, headers=headers)


def test_create_project(client, auth_headers):
    """Test creating a project"""
    response = create_project(client, auth_headers)
    assert response.status_code == status.HTTP_201_CREATED
    assert response.json()["name"] == "Test Project"
    assert response.json()["published"] is False


def test_duplicate_project_name(client, auth_headers):
    create_project(client, auth_headers)
    response = create_project(client, auth_headers)
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_list_projects_by_publication_state(client, auth_headers):
    create_project(client, auth_headers, name="Draft")
    create_project(client, auth_headers, name="Live", published=True)

    response = client.get("/api/projects", headers=auth_headers)
    assert response.status_code == status.HTTP_200_OK
    assert len(response.json()) == 2

    response = client.get("/api/projects", params={"published": "true"}, headers=auth_headers)
    assert [p["name"] for p in response.json()] == ["Live"]


def test_update_project_publishes(client, auth_headers):
    project_id = create_project(client, auth_headers).json()["id"]
    response = client.put(
        f"/api/projects/{project_id}",
        json={"published": True},
        headers=auth_headers
    )
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["published"] is True
    assert response.json()["name"] == "Test Project"


def test_delete_project(client, auth_headers):
    project_id = create_project(client, auth_headers).json()["id"]

    response = client.delete(f"/api/projects/{project_id}", headers=auth_headers)
    assert response.status_code == status.HTTP_204_NO_CONTENT

    get_response = client.get(f"/api/projects/{project_id}", headers=auth_headers)
    assert get_response.status_code == status.HTTP_404_NOT_FOUND


def test_document_crud(client, auth_headers):
    project_id = create_project(client, auth_headers).json()["id"]
    base = f"/api/projects/{project_id}/documents"

    created = client.post(base, json={"name": "Doc", "content": "Hello"}, headers=auth_headers)
    assert created.status_code == status.HTTP_201_CREATED
    document_id = created.json()["id"]
    assert created.json()["project_id"] == project_id

    updated = client.put(f"{base}/{document_id}", json={"content": "Changed"}, headers=auth_headers)
    assert updated.json()["content"] == "Changed"

    assert len(client.get(base, headers=auth_headers).json()) == 1

    assert client.delete(f"{base}/{document_id}", headers=auth_headers).status_code == status.HTTP_204_NO_CONTENT
    assert client.get(f"{base}/{document_id}", headers=auth_headers).status_code == status.HTTP_404_NOT_FOUND


def test_document_of_other_project_not_found(client, auth_headers):
    first = create_project(client, auth_headers, name="First").json()["id"]
    second = create_project(client, auth_headers, name="Second").json()["id"]
    document_id = client.post(
        f"/api/projects/{first}/documents", json={"name": "Doc"}, headers=auth_headers
    ).json()["id"]

    response = client.get(f"/api/projects/{second}/documents/{document_id}", headers=auth_headers)
    assert response.status_code == status.HTTP_404_NOT_FOUND
