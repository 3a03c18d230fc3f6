from facet.common.paginator import LengthAwarePaginator


def test_middle_page_metadata():
    paginator = LengthAwarePaginator(
        items=["a", "b", "c"], total=10, per_page=3, current_page=2,
        options={"path": "http://testserver/books"},
    )
    meta = paginator.to_array()

    assert meta["current_page"] == 2
    assert meta["last_page"] == 4
    assert meta["from"] == 4
    assert meta["to"] == 6
    assert meta["total"] == 10
    assert meta["per_page"] == 3
    assert meta["data"] == ["a", "b", "c"]
    assert meta["path"] == "http://testserver/books"
    assert meta["first_page_url"] == "http://testserver/books?page=1"
    assert meta["prev_page_url"] == "http://testserver/books?page=1"
    assert meta["next_page_url"] == "http://testserver/books?page=3"
    assert meta["last_page_url"] == "http://testserver/books?page=4"


def test_single_page_has_no_neighbours():
    meta = LengthAwarePaginator(["a"], total=1, per_page=15, options={"path": "/books"}).to_array()
    assert meta["prev_page_url"] is None
    assert meta["next_page_url"] is None
    assert meta["last_page"] == 1


def test_empty_result():
    meta = LengthAwarePaginator([], total=0, per_page=15, options={"path": "/books"}).to_array()
    assert meta["from"] is None
    assert meta["to"] is None
    assert meta["last_page"] == 1


def test_appends_carries_query_into_urls():
    paginator = LengthAwarePaginator(
        items=[1], total=30, per_page=10, current_page=1, options={"path": "/books"},
    ).appends({"author": "Austen", "page": "1", "sort": "-price"})

    url = paginator.to_array()["next_page_url"]
    assert url.startswith("/books?")
    assert "author=Austen" in url
    assert "sort=-price" in url
    assert url.count("page=") == 1
    assert url.endswith("page=2")


def test_appends_repeats_multi_value_params():
    paginator = LengthAwarePaginator(
        items=[1], total=30, per_page=10, current_page=1, options={"path": "/books"},
    ).appends({"sort": ["-price", "id"], "page": ["1", "2"]})

    assert paginator.url(2) == "/books?sort=-price&sort=id&page=2"
