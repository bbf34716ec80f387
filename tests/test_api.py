import os
import tempfile
import unittest
from unittest import mock

from fastapi.testclient import TestClient

from core import db
from fakes import FakeCollection, collections_patch
from main import app
from songs.catalog import SongCatalog
from songs.seeding import SeedCoordinator


class ApiTestCase(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.songs = FakeCollection(
            [
                {"track_name": "A", "artist_name": "B", "artist_genre": "pop", "embed": ""},
                {"track_name": "C", "artist_name": "D", "artist_genre": "rock", "embed": ""},
            ]
        )
        self.kebabs = FakeCollection()
        patcher = mock.patch(
            "core.db.collection",
            side_effect=collections_patch(**{db.SONGS: self.songs, db.KEBABS: self.kebabs}),
        )
        patcher.start()
        self.addCleanup(patcher.stop)

        missing_csv = os.path.join(self._tmp.name, "missing.csv")
        app.state.catalog = SongCatalog(seeder=SeedCoordinator(csv_path=missing_csv))
        self.addCleanup(delattr, app.state, "catalog")

        # No context manager: the lifespan (real Mongo client) is not started.
        self.client = TestClient(app)


class TestSongRoutes(ApiTestCase):
    def test_get_genres(self):
        resp = self.client.get("/get-genres")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"genres": ["pop", "rock"], "count": 2})

    def test_random_song_by_genre(self):
        resp = self.client.get("/get-random-song-by-genre", params={"genre": "rock"})
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertEqual(body["track_name"], "C")
        self.assertIsInstance(body["_id"], str)

    def test_random_song_requires_genre(self):
        resp = self.client.get("/get-random-song-by-genre")
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["detail"], "genre query param required")

    def test_random_song_unknown_genre(self):
        resp = self.client.get("/get-random-song-by-genre", params={"genre": "polka"})
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["detail"], "No songs found for genre: polka")

    def test_random_song_genre_is_matched_verbatim(self):
        resp = self.client.get("/get-random-song-by-genre", params={"genre": " pop"})
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["detail"], "No songs found for genre:  pop")

        resp = self.client.get("/get-random-song-by-genre", params={"genre": "x" * 500})
        self.assertEqual(resp.status_code, 404)

    def test_init_failure_is_500(self):
        with mock.patch("songs.repository.count_songs", side_effect=RuntimeError("db down")):
            resp = self.client.get("/get-genres")
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json()["detail"], "db down")


class TestSeedOnFirstRequest(ApiTestCase):
    def test_empty_collection_is_seeded_before_route(self):
        self.songs.documents.clear()
        csv_path = os.path.join(self._tmp.name, "tracks.csv")
        with open(csv_path, "w", encoding="utf-8") as f:
            f.write("track_name,artist_name,track_duration_ms,track_id,artist_genres\n")
            f.write("A,B,1000,x,\"['pop']\"\n")
        app.state.catalog = SongCatalog(seeder=SeedCoordinator(csv_path=csv_path))

        resp = self.client.get("/get-genres")

        self.assertEqual(resp.json(), {"genres": ["pop"], "count": 1})
        self.assertEqual(len(self.songs.documents), 1)


class TestKebabRoutes(ApiTestCase):
    def test_add_and_list(self):
        resp = self.client.post(
            "/add-kebab",
            json={"name": "Doner", "ingredients": ["lamb", "onion"], "price": 8.5},
        )
        self.assertEqual(resp.status_code, 201)
        created = resp.json()
        self.assertEqual(created["name"], "Doner")
        self.assertFalse(created["isVegetarian"])
        self.assertIsInstance(created["_id"], str)

        resp = self.client.get("/get-kebabs")
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertEqual(body["count"], 1)
        self.assertEqual(body["kebabs"][0]["ingredients"], ["lamb", "onion"])

    def test_list_is_not_truncated(self):
        self.kebabs.documents.extend({"name": f"K{i}", "ingredients": [], "price": 1.0} for i in range(600))

        body = self.client.get("/get-kebabs").json()

        self.assertEqual(body["count"], 600)
        self.assertEqual(len(body["kebabs"]), 600)

    def test_vegetarian_flag(self):
        resp = self.client.post(
            "/add-kebab",
            json={"name": "Falafel", "ingredients": ["chickpea"], "price": 7, "isVegetarian": True},
        )
        self.assertEqual(resp.status_code, 201)
        self.assertTrue(self.kebabs.documents[0]["isVegetarian"])

    def test_validation(self):
        for payload in (
            {"ingredients": ["x"], "price": 1},
            {"name": "X", "price": 1},
            {"name": "X", "ingredients": ["x"]},
            {"name": "", "ingredients": ["x"], "price": 1},
        ):
            with self.subTest(payload=payload):
                self.assertEqual(self.client.post("/add-kebab", json=payload).status_code, 422)
        self.assertEqual(self.kebabs.documents, [])


class TestAppRoutes(ApiTestCase):
    def test_health(self):
        self.assertEqual(self.client.get("/health").json(), {"status": "ok"})

    def test_cors_preflight_allowed_origin(self):
        resp = self.client.options(
            "/get-genres",
            headers={"Origin": "http://localhost:3000", "Access-Control-Request-Method": "GET"},
        )
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.headers["access-control-allow-origin"], "http://localhost:3000")

    def test_cors_unknown_origin_gets_no_header(self):
        resp = self.client.get("/health", headers={"Origin": "https://evil.example"})
        self.assertNotIn("access-control-allow-origin", resp.headers)


if __name__ == "__main__":
    unittest.main()
