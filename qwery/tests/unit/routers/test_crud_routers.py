"""API tests for the CRUD routers."""

import pytest

from qwery.domain.exceptions.code import Code

TEST_USER = "test-user"


async def _create_org(client, name: str = "Acme") -> dict:
    response = await client.post(
        "/api/organizations", json={"name": name, "created_by": TEST_USER}
    )
    assert response.status_code == 201
    return response.json()


async def _create_project(client, org_id: str, name: str = "Analytics") -> dict:
    response = await client.post(
        "/api/projects", json={"org_id": org_id, "name": name, "created_by": TEST_USER}
    )
    assert response.status_code == 201
    return response.json()


class TestHealth:
    @pytest.mark.asyncio
    async def test_health(self, client):
        response = await client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"


class TestOrganizationRoutes:
    @pytest.mark.asyncio
    async def test_create_and_get_by_id_or_slug(self, client):
        org = await _create_org(client)

        by_id = await client.get(f"/api/organizations/{org['id']}")
        by_slug = await client.get(f"/api/organizations/{org['slug']}")

        assert by_id.json()["name"] == "Acme"
        assert by_slug.json()["id"] == org["id"]
        assert org["slug"] == org["id"][:8]

    @pytest.mark.asyncio
    async def test_list(self, client):
        await _create_org(client, "a")
        await _create_org(client, "b")

        response = await client.get("/api/organizations")

        assert sorted(o["name"] for o in response.json()) == ["a", "b"]

    @pytest.mark.asyncio
    async def test_update_by_slug(self, client):
        org = await _create_org(client)

        response = await client.put(
            f"/api/organizations/{org['slug']}", json={"name": "Acme Corp", "updated_by": "bob"}
        )

        assert response.status_code == 200
        assert response.json()["name"] == "Acme Corp"
        assert response.json()["updated_by"] == "bob"

    @pytest.mark.asyncio
    async def test_delete(self, client):
        org = await _create_org(client)

        response = await client.delete(f"/api/organizations/{org['id']}")

        assert response.json() == {"success": True}
        assert (await client.get(f"/api/organizations/{org['id']}")).status_code == 404

    @pytest.mark.asyncio
    async def test_not_found_body(self, client):
        response = await client.get("/api/organizations/00000000-0000-0000-0000-000000000000")

        assert response.status_code == 404
        body = response.json()
        assert body["code"] == Code.ORGANIZATION_NOT_FOUND_ERROR.code
        assert body["error"] == (
            "Organization with id '00000000-0000-0000-0000-000000000000' not found"
        )
        assert body["data"] == {"organization_id": "00000000-0000-0000-0000-000000000000"}

    @pytest.mark.asyncio
    async def test_validation_error(self, client):
        response = await client.post("/api/organizations", json={"name": " ", "created_by": "x"})

        assert response.status_code == 400
        assert response.json()["code"] == Code.BAD_REQUEST_ERROR.code


class TestProjectRoutes:
    @pytest.mark.asyncio
    async def test_filter_by_organization(self, client):
        org = await _create_org(client)
        other = await _create_org(client, "Other")
        project = await _create_project(client, org["id"])
        await _create_project(client, other["id"], "Elsewhere")

        response = await client.get("/api/projects", params={"org_id": org["id"]})

        assert [p["id"] for p in response.json()] == [project["id"]]
        assert len((await client.get("/api/projects")).json()) == 2


class TestUserRoutes:
    @pytest.mark.asyncio
    async def test_crud(self, client):
        created = (await client.post("/api/users", json={"username": "alice"})).json()

        updated = await client.put(f"/api/users/{created['id']}", json={"username": "alice2"})
        deleted = await client.delete(f"/api/users/{created['id']}")

        assert updated.json()["username"] == "alice2"
        assert deleted.json() == {"success": True}
        assert (await client.get(f"/api/users/{created['id']}")).status_code == 404


class TestDatasourceRoutes:
    @pytest.mark.asyncio
    async def test_create_update_list(self, client):
        org = await _create_org(client)
        project = await _create_project(client, org["id"])
        created = await client.post(
            "/api/datasources",
            json={
                "project_id": project["id"],
                "name": "warehouse",
                "datasource_provider": "postgresql",
                "datasource_driver": "pg",
                "created_by": TEST_USER,
                "config": {"host": "db"},
            },
        )
        assert created.status_code == 201
        datasource = created.json()

        updated = await client.put(
            f"/api/datasources/{datasource['slug']}", json={"config": {"host": "replica"}}
        )
        listed = await client.get("/api/datasources", params={"project_id": project["id"]})

        assert updated.json() == {"success": True}
        assert listed.json()[0]["config"] == {"host": "replica"}


class TestNotebookRoutes:
    @pytest.mark.asyncio
    async def test_cells_and_version(self, client):
        org = await _create_org(client)
        project = await _create_project(client, org["id"])
        created = (
            await client.post(
                "/api/notebooks",
                json={
                    "project_id": project["id"],
                    "title": "Sales",
                    "created_by": TEST_USER,
                    "cells": [{"cell_id": 1, "query": "SELECT 1"}],
                },
            )
        ).json()

        updated = await client.put(
            f"/api/notebooks/{created['slug']}",
            json={"cells": [{"cell_id": 1, "query": "SELECT 2"}]},
        )
        listed = await client.get("/api/notebooks", params={"project_id": project["id"]})

        assert updated.json()["version"] == created["version"] + 1
        assert updated.json()["cells"][0]["query"] == "SELECT 2"
        assert [n["id"] for n in listed.json()] == [created["id"]]

    @pytest.mark.asyncio
    async def test_list_requires_project(self, client):
        assert (await client.get("/api/notebooks")).status_code == 400


class TestConversationRoutes:
    @pytest.mark.asyncio
    async def test_conversation_and_messages(self, client):
        org = await _create_org(client)
        project = await _create_project(client, org["id"])
        conversation = (
            await client.post(
                "/api/conversations",
                json={"project_id": project["id"], "task_id": "t1", "created_by": TEST_USER},
            )
        ).json()
        assert conversation["title"] == "New Conversation"

        created = await client.post(
            f"/api/conversations/{conversation['slug']}/messages",
            json={
                "id": "ui-1",
                "content": {"role": "user", "parts": [{"type": "text", "text": "hi"}]},
                "role": "user",
                "created_by": TEST_USER,
            },
        )
        messages = await client.get(f"/api/conversations/{conversation['slug']}/messages")
        message = await client.get("/api/messages/ui-1")

        assert created.status_code == 201
        assert [m["id"] for m in messages.json()] == ["ui-1"]
        assert message.json()["conversation_id"] == conversation["id"]

    @pytest.mark.asyncio
    async def test_update_title(self, client):
        org = await _create_org(client)
        project = await _create_project(client, org["id"])
        conversation = (
            await client.post(
                "/api/conversations",
                json={"project_id": project["id"], "task_id": "t1", "created_by": TEST_USER},
            )
        ).json()

        response = await client.put(
            f"/api/conversations/{conversation['slug']}", json={"title": "Revenue"}
        )

        assert response.json()["title"] == "Revenue"

    @pytest.mark.asyncio
    async def test_messages_of_unknown_conversation(self, client):
        response = await client.get("/api/conversations/ghost123/messages")

        assert response.status_code == 404
        assert response.json()["code"] == Code.CONVERSATION_NOT_FOUND_ERROR.code


class TestReferentialIntegrityRoutes:
    @pytest.mark.asyncio
    async def test_project_for_unknown_organization(self, client):
        response = await client.post(
            "/api/projects",
            json={
                "org_id": "00000000-0000-0000-0000-000000000000",
                "name": "Orphan",
                "created_by": TEST_USER,
            },
        )

        assert response.status_code == 404
        assert "does not exist" in response.json()["error"]
        assert (await client.get("/api/projects")).json() == []

    @pytest.mark.asyncio
    async def test_deleting_conversation_removes_its_messages(self, client):
        org = await _create_org(client)
        project = await _create_project(client, org["id"])
        conversation = (
            await client.post(
                "/api/conversations",
                json={"project_id": project["id"], "task_id": "t1", "created_by": TEST_USER},
            )
        ).json()
        await client.post(
            f"/api/conversations/{conversation['slug']}/messages",
            json={
                "id": "ui-9",
                "content": {"role": "user", "parts": [{"type": "text", "text": "hi"}]},
                "role": "user",
                "created_by": TEST_USER,
            },
        )

        deleted = await client.delete(f"/api/conversations/{conversation['id']}")

        assert deleted.status_code == 200
        assert (await client.get("/api/messages/ui-9")).status_code == 404
