import pytest
from unittest.mock import patch
from mediafinder.app.cli import build_parser, main
from mediafinder.core.schema import DetailResult, SearchHit


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ("TMDB_TOKEN", "TMDB_BASE_URL"):
        # set first so that values loaded from .env files are undone too
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.query is None
    assert args.first is False
    assert args.log_dir == "./logs"


def test_missing_token_exits_before_network(capsys):
    with patch("mediafinder.app.graph.TMDBAdapter") as mock_adapter:
        with pytest.raises(SystemExit) as excinfo:
            main(["example"])

    assert excinfo.value.code == 1
    assert "TMDB_TOKEN must be set." in capsys.readouterr().err
    mock_adapter.assert_not_called()


def test_run_with_first_result(monkeypatch, tmp_path, capsys):
    monkeypatch.setenv("TMDB_TOKEN", "test_token")

    with patch("mediafinder.app.graph.TMDBAdapter") as mock_adapter:
        mock_adapter.return_value.search_multi.return_value = [
            SearchHit(id=42, title="Example", media_type="movie", release_date="2020-01-01")
        ]
        mock_adapter.return_value.get_details.return_value = DetailResult(runtime=120, tagline="A tagline")
        main(["example", "--first", "--log-dir", str(tmp_path / "logs")])

    mock_adapter.assert_called_once()
    assert mock_adapter.call_args.kwargs["token"] == "test_token"
    out = capsys.readouterr().out
    assert "120 mins." in out
    assert "/movie/42" in out
    assert list((tmp_path / "logs").glob("mediafinder_*.log"))


def test_unexpected_failure_exits_with_error(monkeypatch):
    monkeypatch.setenv("TMDB_TOKEN", "test_token")

    with patch("mediafinder.app.graph.TMDBAdapter") as mock_adapter:
        mock_adapter.return_value.search_multi.side_effect = RuntimeError("unexpected")
        with pytest.raises(SystemExit) as excinfo:
            main(["example", "--no-log-file"])

    assert excinfo.value.code == 1


def test_graph_input_carries_only_query_and_first(monkeypatch):
    monkeypatch.setenv("TMDB_TOKEN", "test_token")

    with patch("mediafinder.app.cli.MediaSearchGraph") as mock_graph:
        main(["example", "--quiet", "--no-log-file"])

    mock_graph.return_value.run.assert_called_once_with({"query": "example", "first": False})
