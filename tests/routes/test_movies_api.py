"""HTTP tests for the /movies endpoints."""
import pytest

EMPTY_MOVIE = {"id": "", "isbn": "", "title": "", "director": None}
SEEDED = [
    {"id": "1", "isbn": "438227", "title": "Movie One",
     "director": {"firstname": "John", "lastname": "Doe"}},
    {"id": "2", "isbn": "45455", "title": "Movie Two",
     "director": {"firstname": "Steve", "lastname": "Smith"}},
]


def test_list_returns_seeded_movies(client):
    response = client.get("/movies")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/json")
    assert response.json() == SEEDED


def test_list_empty_collection(client, state):
    state.repository.remove_at(0)
    state.repository.remove_at(0)
    assert client.get("/movies").json() == []


def test_get_by_id(client):
    response = client.get("/movies/2")
    assert response.status_code == 200
    assert response.json() == SEEDED[1]


@pytest.mark.parametrize("movie_id", ["does-not-exist", "3", "01"])
def test_get_missing_returns_empty_movie(client, movie_id):
    for _ in range(2):
        response = client.get(f"/movies/{movie_id}")
        assert response.status_code == 200
        assert response.json() == EMPTY_MOVIE


def test_create_then_get_round_trip(client):
    payload = {"isbn": "X", "title": "T", "director": {"firstname": "A", "lastname": "B"}}

    created = client.post("/movies", json=payload)
    assert created.status_code == 200
    body = created.json()
    assert body["id"] != ""
    assert int(body["id"]) < 10_000_000

    fetched = client.get(f"/movies/{body['id']}").json()
    assert fetched == {"id": body["id"], **payload}


def test_create_ignores_body_id(client, state):
    state.id_generator = lambda: "555"
    body = client.post("/movies", json={"id": "1", "title": "Other"}).json()

    assert body == {"id": "555", "isbn": "", "title": "Other", "director": None}
    assert [m["id"] for m in client.get("/movies").json()] == ["1", "2", "555"]


def test_create_appends_to_end(client):
    body = client.post("/movies", json={"title": "Third"}).json()
    movies = client.get("/movies").json()
    assert len(movies) == 3
    assert movies[-1] == body


def test_create_with_empty_body(client):
    response = client.post("/movies", content=b"")

    assert response.status_code == 200
    body = response.json()
    assert body["id"] != ""
    assert body["isbn"] == ""
    assert body["title"] == ""
    assert body["director"] is None


def test_create_with_malformed_json(client):
    response = client.post(
        "/movies", content=b'{"title": "broken"', headers={"content-type": "application/json"}
    )
    assert response.status_code == 200
    assert response.json()["title"] == ""


def test_update_moves_record_to_end(client):
    response = client.put("/movies/1", json={"isbn": "438227", "title": "Movie One Redux"})
    assert response.status_code == 200
    assert response.json() == {"id": "1", "isbn": "438227", "title": "Movie One Redux", "director": None}

    movies = client.get("/movies").json()
    assert [m["id"] for m in movies] == ["2", "1"]
    assert movies[-1]["title"] == "Movie One Redux"


def test_update_forces_path_id(client):
    body = client.put("/movies/2", json={"id": "77", "title": "Renamed"}).json()
    assert body["id"] == "2"
    assert client.get("/movies/77").json() == EMPTY_MOVIE


def test_update_missing_returns_empty_movie(client):
    response = client.put("/movies/nope", json={"title": "Ghost"})

    assert response.status_code == 200
    assert response.json() == EMPTY_MOVIE
    assert client.get("/movies").json() == SEEDED


def test_delete_removes_exactly_one(client):
    response = client.delete("/movies/1")
    assert response.status_code == 200
    assert response.json() == [SEEDED[1]]

    again = client.delete("/movies/1")
    assert again.status_code == 200
    assert again.json() == [SEEDED[1]]


def test_delete_missing_returns_unchanged_collection(client):
    assert client.delete("/movies/nope").json() == SEEDED


def test_create_keeps_fields_around_a_mistyped_one(client):
    response = client.post(
        "/movies",
        content=b'{"ISBN":"X","title":"T","director":{"firstname":"A","lastname":1}}',
        headers={"content-type": "application/json"},
    )
    body = response.json()

    assert response.status_code == 200
    assert (body["isbn"], body["title"]) == ("X", "T")
    assert body["director"] == {"firstname": "A", "lastname": ""}
