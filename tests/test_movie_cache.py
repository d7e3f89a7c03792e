from movie_cache import MovieCache


def test_replace_all_copies_sequence(sample_movies):
    cache = MovieCache()
    cache.replace_all(sample_movies)
    sample_movies.append({"id": 3})
    assert len(cache) == 2
    assert [m["id"] for m in cache] == [1, 2]


def test_upsert_existing_id_replaces_in_place(sample_movies):
    cache = MovieCache(sample_movies)
    updated = {"id": 1, "title": "Dune: Part One", "year": 2021, "genre": "Sci-Fi"}
    cache.upsert(updated)
    assert len(cache) == 2
    assert cache.all()[0] == updated
    assert cache.get(1) == updated


def test_upsert_new_id_appends(sample_movies):
    cache = MovieCache(sample_movies)
    new = {"id": 3, "title": "Heat", "year": 1995, "genre": "Crime"}
    cache.upsert(new)
    assert len(cache) == 3
    assert cache.all()[-1] == new
    assert 3 in cache


def test_remove_by_id_present(sample_movies):
    cache = MovieCache(sample_movies)
    assert cache.remove_by_id(2) is True
    assert len(cache) == 1
    assert 2 not in cache


def test_remove_by_id_absent_is_noop(sample_movies):
    cache = MovieCache(sample_movies)
    assert cache.remove_by_id(99) is False
    assert len(cache) == 2


def test_ids_compare_by_value_and_type(sample_movies):
    cache = MovieCache(sample_movies)
    assert cache.get("1") is None
    assert cache.get(1)["title"] == "Dune"


def test_all_returns_snapshot(sample_movies):
    cache = MovieCache(sample_movies)
    snap = cache.all()
    snap.clear()
    assert len(cache) == 2
