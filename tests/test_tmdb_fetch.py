import pytest
import requests
from unittest.mock import Mock, patch
from mediafinder.adapters.tmdb import TMDBAdapter
from mediafinder.core.errors import TMDBRequestError


def test_tmdb_adapter_init():
    """Test TMDB adapter initialization."""
    adapter = TMDBAdapter("test_token", proxy={"https": "proxy"})
    assert adapter.token == "test_token"
    assert adapter.proxy == {"https": "proxy"}
    assert adapter.session.headers["Authorization"] == "Bearer test_token"
    assert adapter.session.headers["Accept"] == "application/json"


@patch('mediafinder.adapters.tmdb.requests.Session')
def test_tmdb_search_multi(mock_session):
    """Test multi search request and deserialization."""
    mock_response = Mock()
    mock_response.json.return_value = {
        "page": 1,
        "results": [
            {"id": 1, "original_title": "Test Movie", "media_type": "movie", "release_date": "2020-01-01"},
            {"id": 2, "original_name": "Test Show", "media_type": "tv", "popularity": 3.5}
        ],
        "total_results": 2
    }
    mock_session.return_value.get.return_value = mock_response

    adapter = TMDBAdapter("test_token")
    hits = adapter.search_multi("test movie")

    assert [hit.id for hit in hits] == [1, 2]
    assert hits[0].title == "Test Movie"
    assert hits[1].name == "Test Show"
    mock_session.return_value.get.assert_called_once_with(
        "https://api.themoviedb.org/3/search/multi",
        params={"page": 1, "include_adult": "false", "language": "en-US", "query": "test movie"},
        timeout=30
    )


@patch('mediafinder.adapters.tmdb.requests.Session')
def test_tmdb_search_multi_passes_empty_term(mock_session):
    """Test that an empty term is sent as is."""
    mock_response = Mock()
    mock_response.json.return_value = {"results": []}
    mock_session.return_value.get.return_value = mock_response

    adapter = TMDBAdapter("test_token")

    assert adapter.search_multi("") == []
    assert mock_session.return_value.get.call_args.kwargs["params"]["query"] == ""


@patch('mediafinder.adapters.tmdb.requests.Session')
def test_tmdb_search_multi_transport_error(mock_session):
    """Test that a transport failure is raised as TMDBRequestError after one attempt."""
    mock_session.return_value.get.side_effect = requests.ConnectionError("boom")

    adapter = TMDBAdapter("test_token")
    with pytest.raises(TMDBRequestError) as excinfo:
        adapter.search_multi("test")

    assert excinfo.value.endpoint == "/search/multi"
    mock_session.return_value.get.assert_called_once()


@patch('mediafinder.adapters.tmdb.requests.Session')
def test_tmdb_search_multi_http_error(mock_session):
    """Test that an error status is raised as TMDBRequestError."""
    mock_response = Mock()
    mock_response.raise_for_status.side_effect = requests.HTTPError("401 Client Error")
    mock_session.return_value.get.return_value = mock_response

    adapter = TMDBAdapter("bad_token")
    with pytest.raises(TMDBRequestError):
        adapter.search_multi("test")


@patch('mediafinder.adapters.tmdb.requests.Session')
def test_tmdb_search_multi_invalid_json(mock_session):
    """Test that an undecodable body is raised as TMDBRequestError."""
    mock_response = Mock()
    mock_response.json.side_effect = ValueError("Expecting value")
    mock_session.return_value.get.return_value = mock_response

    adapter = TMDBAdapter("test_token")
    with pytest.raises(TMDBRequestError):
        adapter.search_multi("test")


@patch('mediafinder.adapters.tmdb.requests.Session')
def test_tmdb_search_multi_malformed_results(mock_session):
    """Test that results without ids are rejected."""
    mock_response = Mock()
    mock_response.json.return_value = {"results": [{"original_title": "No id"}]}
    mock_session.return_value.get.return_value = mock_response

    adapter = TMDBAdapter("test_token")
    with pytest.raises(TMDBRequestError):
        adapter.search_multi("test")


@patch('mediafinder.adapters.tmdb.requests.Session')
def test_tmdb_get_movie_details(mock_session):
    """Test getting movie details."""
    mock_response = Mock()
    mock_response.json.return_value = {"id": 42, "title": "Example", "runtime": 120, "tagline": "A tagline"}
    mock_session.return_value.get.return_value = mock_response

    adapter = TMDBAdapter("test_token")
    detail = adapter.get_details(42, "movie")

    assert detail.runtime == 120
    assert detail.tagline == "A tagline"
    assert detail.number_of_seasons is None
    mock_session.return_value.get.assert_called_once_with(
        "https://api.themoviedb.org/3/movie/42",
        params={"language": "en-US"},
        timeout=30
    )


@patch('mediafinder.adapters.tmdb.requests.Session')
def test_tmdb_get_tv_details(mock_session):
    """Test getting TV details."""
    mock_response = Mock()
    mock_response.json.return_value = {"id": 7, "number_of_seasons": 3, "number_of_episodes": 24}
    mock_session.return_value.get.return_value = mock_response

    adapter = TMDBAdapter("test_token", base_url="http://tmdb.test/3/", language="de-DE")
    detail = adapter.get_details(7, "tv")

    assert detail.has_tv_counts
    assert mock_session.return_value.get.call_args.args[0] == "http://tmdb.test/3/tv/7"
    assert mock_session.return_value.get.call_args.kwargs["params"] == {"language": "de-DE"}


@patch('mediafinder.adapters.tmdb.requests.Session')
def test_tmdb_get_details_rejects_person(mock_session):
    """Test that no request is made for person details."""
    adapter = TMDBAdapter("test_token")

    with pytest.raises(ValueError):
        adapter.get_details(5, "person")
    mock_session.return_value.get.assert_not_called()
