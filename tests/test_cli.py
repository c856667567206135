import json
from unittest.mock import MagicMock, patch

from moodcam_recs.cli import main, create_parser
from moodcam_recs.errors import SearchFailure
from moodcam_recs.recommender import RecommendationOutput
from moodcam_recs.spotify_client import Track


def make_output(mood="calm"):
    track = Track(
        id="t1",
        name="Weightless",
        artist="Marconi Union",
        album="Weightless",
        image="",
        preview_url=None,
        external_url="https://open.spotify.com/track/t1",
        duration_ms=488000,
    )
    return RecommendationOutput(mood=mood, query="chill", tracks=[track])


def test_recommend_prints_json(capsys):
    recommender = MagicMock()
    recommender.recommend.return_value = make_output()

    assert main(["recommend", "calm"], recommender=recommender) == 0

    body = json.loads(capsys.readouterr().out)
    assert body["mood"] == "calm"
    assert body["tracks"][0]["name"] == "Weightless"
    recommender.recommend.assert_called_once_with("calm")


def test_recommend_simple_format(capsys):
    recommender = MagicMock()
    recommender.recommend.return_value = make_output()

    main(["recommend", "calm", "--format", "simple"], recommender=recommender)

    out = capsys.readouterr().out
    assert "Weightless (8:08)" in out
    assert "Marconi Union" in out


def test_analyze_reads_image_file(tmp_path, capsys):
    image = tmp_path / "face.jpg"
    image.write_bytes(b"jpeg-bytes")
    recommender = MagicMock()
    recommender.analyze_mood.return_value = "tired"

    assert main(["analyze", str(image)], recommender=recommender) == 0

    assert capsys.readouterr().out.strip() == "tired"
    recommender.recommend.assert_not_called()


def test_analyze_with_recommend_chains_pipeline(tmp_path, capsys):
    image = tmp_path / "face.jpg"
    image.write_bytes(b"jpeg-bytes")
    recommender = MagicMock()
    recommender.analyze_mood.return_value = "calm"
    recommender.recommend.return_value = make_output()

    assert main(["analyze", str(image), "--recommend"], recommender=recommender) == 0

    recommender.recommend.assert_called_once_with("calm")


def test_output_file(tmp_path):
    recommender = MagicMock()
    recommender.recommend.return_value = make_output()
    target = tmp_path / "recs.json"

    main(["recommend", "calm", "-o", str(target)], recommender=recommender)

    assert json.loads(target.read_text(encoding="utf-8"))["mood"] == "calm"


def test_failure_returns_exit_code_1(capsys):
    recommender = MagicMock()
    recommender.recommend.side_effect = SearchFailure("Failed to search tracks", status=502)

    assert main(["recommend", "calm"], recommender=recommender) == 1
    assert "Failed to search tracks" in capsys.readouterr().err


def test_serve_runs_uvicorn():
    with patch("moodcam_recs.cli.run_server") as mock_run:
        assert main(["serve", "--host", "127.0.0.1", "--port", "8080"]) == 0

    mock_run.assert_called_once_with("127.0.0.1", 8080, False)


def test_parser_defaults():
    args = create_parser().parse_args(["recommend", "happy"])

    assert args.num == 12
    assert args.format == "json"
