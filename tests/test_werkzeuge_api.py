"""HTTP tests for /werkzeuge: tool records with forced lending state on create."""

import re
import tempfile
import unittest
from pathlib import Path

from fastapi.testclient import TestClient

from toolshare.core.config import Settings
from toolshare.main import create_app

ISO_MILLIS = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$")


def _client(test: unittest.TestCase, backend: str = "json") -> TestClient:
    """Start the app on a throwaway data directory and stop it when the test ends."""
    tmp = tempfile.TemporaryDirectory()
    test.addCleanup(tmp.cleanup)
    settings = Settings(
        _env_file=None,
        STORE_BACKEND=backend,
        DATA_DIR=Path(tmp.name) / "data",
        DATABASE_URL=f"sqlite:///{Path(tmp.name) / 'toolshare.db'}",
    )
    client = TestClient(create_app(settings), raise_server_exceptions=False)
    client.__enter__()
    test.addCleanup(client.__exit__, None, None, None)
    return client


class TestSeededTools(unittest.TestCase):
    def test_fresh_deployment_returns_two_tools(self) -> None:
        tools = _client(self).get("/werkzeuge").json()
        self.assertEqual(
            tools[0],
            {
                "id": 1,
                "name": "Bohrmaschine",
                "owner": "admin",
                "image": None,
                "status": "available",
                "borrower": None,
                "borrowedDate": None,
            },
        )
        hammer = tools[1]
        self.assertEqual(hammer["id"], 2)
        self.assertEqual(hammer["name"], "Hammer")
        self.assertEqual(hammer["status"], "borrowed")
        self.assertEqual(hammer["borrower"], "anna")
        self.assertRegex(hammer["borrowedDate"], ISO_MILLIS)


class TestCreateTool(unittest.TestCase):
    def test_create_forces_lending_state(self) -> None:
        response = _client(self).post("/werkzeuge", json={"name": "Saw", "owner": "max"})
        self.assertEqual(response.status_code, 201)
        body = response.json()
        self.assertEqual(
            body,
            {
                "name": "Saw",
                "owner": "max",
                "id": 3,
                "status": "available",
                "borrower": None,
                "borrowedDate": None,
            },
        )
        self.assertEqual(list(body), ["name", "owner", "id", "status", "borrower", "borrowedDate"])

    def test_new_tool_is_never_borrowed(self) -> None:
        response = _client(self).post(
            "/werkzeuge",
            json={
                "name": "Saw",
                "owner": "max",
                "status": "borrowed",
                "borrower": "anna",
                "borrowedDate": "2024-01-01T00:00:00.000Z",
            },
        )
        body = response.json()
        self.assertEqual(body["status"], "borrowed")
        self.assertIsNone(body["borrower"])
        self.assertIsNone(body["borrowedDate"])

    def test_empty_status_defaults_to_available(self) -> None:
        body = _client(self).post("/werkzeuge", json={"name": "Saw", "status": ""}).json()
        self.assertEqual(body["status"], "available")

    def test_extra_fields_are_kept(self) -> None:
        body = _client(self).post("/werkzeuge", json={"name": "Saw", "image": "saw.png", "note": "sharp"}).json()
        self.assertEqual(body["image"], "saw.png")
        self.assertEqual(body["note"], "sharp")

    def test_missing_body_is_400(self) -> None:
        response = _client(self).post("/werkzeuge")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "Request body required"})


class TestBorrowAndReturn(unittest.TestCase):
    """Lending state only changes through a full PUT of the record."""

    def test_borrow_is_stored_verbatim(self) -> None:
        client = _client(self)
        borrowed = {
            "id": 1,
            "name": "Bohrmaschine",
            "owner": "admin",
            "status": "borrowed",
            "borrower": "anna",
            "borrowedDate": "2024-05-01T09:30:00.000Z",
        }
        response = client.put("/werkzeuge", json=borrowed)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), borrowed)
        self.assertEqual(client.get("/werkzeuge").json()[0], borrowed)

    def test_return_clears_lending_state(self) -> None:
        client = _client(self)
        hammer = client.get("/werkzeuge").json()[1]
        returned = {**hammer, "status": "available", "borrower": None, "borrowedDate": None}
        client.put("/werkzeuge", json=returned)
        self.assertEqual(client.get("/werkzeuge").json()[1], returned)

    def test_incoherent_state_is_not_rejected(self) -> None:
        client = _client(self)
        odd = {"id": 1, "name": "Bohrmaschine", "status": "available", "borrower": "max"}
        self.assertEqual(client.put("/werkzeuge", json=odd).status_code, 200)

    def test_unknown_tool_is_404(self) -> None:
        client = _client(self)
        response = client.put("/werkzeuge", json={"id": 9, "name": "Ghost"})
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {"error": "Werkzeug not found"})
        self.assertEqual([t["id"] for t in client.get("/werkzeuge").json()], [1, 2])

    def test_missing_id_is_400(self) -> None:
        response = _client(self).put("/werkzeuge", json={"name": "No id"})
        self.assertEqual(response.json(), {"error": "Werkzeug ID required"})


class TestDeleteTool(unittest.TestCase):
    def test_delete(self) -> None:
        client = _client(self)
        self.assertEqual(client.delete("/werkzeuge?id=1").json(), {"success": True})
        self.assertEqual([t["id"] for t in client.get("/werkzeuge").json()], [2])

    def test_delete_unknown_is_404(self) -> None:
        response = _client(self).delete("/werkzeuge?id=5")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {"error": "Werkzeug not found"})

    def test_delete_missing_param_is_400(self) -> None:
        response = _client(self).delete("/werkzeuge")
        self.assertEqual(response.json(), {"error": "Werkzeug ID required"})


class TestSqlBackend(unittest.TestCase):
    """The same contract holds when stores live in SQLite."""

    def test_crud_cycle(self) -> None:
        client = _client(self, backend="sql")
        created = client.post("/werkzeuge", json={"name": "Saw", "owner": "max"}).json()
        self.assertEqual(created["id"], 3)
        borrowed = {**created, "status": "borrowed", "borrower": "anna", "borrowedDate": "2024-05-01T09:30:00.000Z"}
        self.assertEqual(client.put("/werkzeuge", json=borrowed).status_code, 200)
        self.assertEqual(client.get("/werkzeuge").json()[-1], borrowed)
        self.assertEqual(client.delete("/werkzeuge?id=3").status_code, 200)
        self.assertEqual(len(client.get("/werkzeuge").json()), 2)
        huge = "99999999999999999999999"
        response = client.delete(f"/werkzeuge?id={huge}")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {"error": "Werkzeug not found"})
        response = client.put("/werkzeuge", json={"id": int(huge), "name": "Ghost"})
        self.assertEqual(response.status_code, 404)
        self.assertEqual(len(client.get("/werkzeuge").json()), 2)
        health = client.get("/health").json()
        self.assertEqual(health["store_backend"], "sql")
        self.assertEqual(health["database"], "connected")


if __name__ == "__main__":
    unittest.main()
