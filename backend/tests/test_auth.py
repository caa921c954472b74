from fastapi import status


def test_register_user(client):
    """Test user registration"""
    response = client.post(
        "/api/auth/register",
        json={"email": "test@example.com", "password": "testpassword123"}
    )
    assert response.status_code == status.HTTP_201_CREATED
    assert "access_token" in response.json()
    assert response.json()["token_type"] == "bearer"


def test_register_duplicate_email(client):
    """Emails are unique regardless of case"""
    client.post(
        "/api/auth/register",
        json={"email": "test@example.com", "password": "testpassword123"}
    )
    
    response = client.post(
        "/api/auth/register",
        json={"email": "Test@Example.com", "password": "testpassword123"}
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_register_short_password(client):
    """Passwords shorter than eight characters are rejected"""
    response = client.post(
        "/api/auth/register",
        json={"email": "test@example.com", "password": "short"}
    )
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_login(client):
    """Test user login"""
    client.post(
        "/api/auth/register",
        json={"email": "test@example.com", "password": "testpassword123"}
    )
    
    response = client.post(
        "/api/auth/login",
        json={"email": "test@example.com", "password": "testpassword123"}
    )
    assert response.status_code == status.HTTP_200_OK
    assert "access_token" in response.json()


def test_login_invalid_credentials(client):
    """Test login with invalid credentials"""
    response = client.post(
        "/api/auth/login",
        json={"email": "test@example.com", "password": "wrongpassword"}
    )
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_protected_route_requires_token(client):
    """Block listing needs a bearer token"""
    response = client.get("/api/blocks")
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_invalid_token_rejected(client):
    """A garbage token on an optional-auth route is still an error"""
    response = client.get(
        "/api/regions/sidebar/render",
        headers={"Authorization": "Bearer not-a-token"}
    )
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
