import pytest
import requests

from errors import NetworkError, RemoteError
from movies_api import MoviesAPI


def test_base_url_trailing_slash_is_stripped(api):
    assert api.base_url == "http://localhost:3000/movies"


def test_default_session_does_not_retry_mutations():
    client = MoviesAPI("http://example.test/movies")
    retry = client.session.get_adapter("http://example.test").max_retries
    assert retry.total == 0
    assert "POST" not in retry.allowed_methods
    assert "PATCH" not in retry.allowed_methods


def test_list_all_returns_movies(api, fake_session, sample_movies):
    fake_session.reply(200, sample_movies)
    assert api.list_all() == sample_movies
    call = fake_session.calls[0]
    assert call["method"] == "GET"
    assert call["url"] == "http://localhost:3000/movies"
    assert call["timeout"] == 5
    assert call["headers"]["Accept"] == "application/json"


def test_list_all_non_list_body_is_empty(api, fake_session):
    fake_session.reply(200, {"error": "nope"})
    assert api.list_all() == []


def test_list_all_non_success_raises_remote_error(api, fake_session):
    fake_session.reply(503)
    with pytest.raises(RemoteError) as exc:
        api.list_all()
    assert exc.value.status == 503
    assert str(exc.value) == "Server returned 503"


def test_list_all_transport_failure_raises_network_error(api, fake_session):
    fake_session.raise_error(requests.ConnectionError("refused"))
    with pytest.raises(NetworkError) as exc:
        api.list_all()
    assert "refused" in str(exc.value)


def test_timeout_is_a_network_error(api, fake_session):
    fake_session.raise_error(requests.Timeout("slow"))
    with pytest.raises(NetworkError):
        api.list_all()


def test_create_posts_draft_and_returns_created(api, fake_session):
    fake_session.reply(201, {"id": 7, "title": "Heat", "genre": "Crime", "year": 1995})
    created = api.create({"title": "Heat", "genre": "Crime", "year": 1995})
    assert created["id"] == 7
    call = fake_session.calls[0]
    assert call["method"] == "POST"
    assert call["json"] == {"title": "Heat", "genre": "Crime", "year": 1995}


def test_create_failure_message_carries_status(api, fake_session):
    fake_session.reply(500)
    with pytest.raises(RemoteError) as exc:
        api.create({"title": "Nope", "genre": "", "year": 1999})
    assert exc.value.status == 500
    assert str(exc.value) == "Add failed: 500"


def test_create_invalid_json_is_remote_error(api, fake_session):
    fake_session.reply(201)
    with pytest.raises(RemoteError) as exc:
        api.create({"title": "Heat", "genre": "", "year": 1995})
    assert exc.value.status == 201


def test_update_patches_item_url(api, fake_session):
    fake_session.reply(200, {"id": 1, "title": "Dune", "year": 2022, "genre": "Sci-Fi"})
    updated = api.update(1, {"year": 2022})
    assert updated["year"] == 2022
    call = fake_session.calls[0]
    assert call["method"] == "PATCH"
    assert call["url"] == "http://localhost:3000/movies/1"
    assert call["json"] == {"year": 2022}


def test_update_unknown_id_raises(api, fake_session):
    fake_session.reply(404, {})
    with pytest.raises(RemoteError) as exc:
        api.update("missing", {"title": "x"})
    assert exc.value.status == 404
    assert "Update failed: 404" in str(exc.value)


def test_update_non_object_body_is_remote_error(api, fake_session):
    fake_session.reply(200, [1, 2])
    with pytest.raises(RemoteError):
        api.update(1, {"title": "x"})


def test_remove_ignores_empty_body(api, fake_session):
    fake_session.reply(200)
    assert api.remove(2) is None
    assert fake_session.calls[0]["method"] == "DELETE"
    assert fake_session.calls[0]["url"] == "http://localhost:3000/movies/2"


def test_remove_failure(api, fake_session):
    fake_session.reply(500)
    with pytest.raises(RemoteError) as exc:
        api.remove(2)
    assert str(exc.value) == "Delete failed: 500"


@pytest.mark.parametrize("status", [300, 302, 304])
def test_remove_unfollowed_redirect_is_a_failure(api, fake_session, status):
    fake_session.reply(status)
    with pytest.raises(RemoteError) as exc:
        api.remove(2)
    assert exc.value.status == status
    assert str(exc.value) == f"Delete failed: {status}"
