"""
Tests for the ranking command line.
"""

import json

from talentmatch.cli import main


class TestRankCli:
    """Test argument handling and output."""

    def test_writes_output_file(self, pool_file, tmp_path):
        out = tmp_path / "matches.json"
        code = main(["--data", str(pool_file), "--job-id", "job_001", "--output", str(out)])
        assert code == 0
        data = json.loads(out.read_text())
        assert data["job_id"] == "job_001"
        assert data["results"][0]["candidate_id"] == "cand_001"
        assert data["results"][0]["overall"] == 87
        assert data["summary"]["total"] == 3

    def test_prints_to_stdout(self, pool_file, capsys):
        code = main(["--data", str(pool_file), "--job-id", "job_001", "--min-score", "80"])
        assert code == 0
        data = json.loads(capsys.readouterr().out)
        assert [r["candidate_id"] for r in data["results"]] == ["cand_001"]

    def test_filters(self, pool_file, capsys):
        code = main([
            "--data", str(pool_file),
            "--job-id", "job_001",
            "--availability", "available",
            "--skills", "react",
            "--sort-by", "experience",
        ])
        assert code == 0
        data = json.loads(capsys.readouterr().out)
        assert [r["candidate_id"] for r in data["results"]] == ["cand_001"]

    def test_min_score_above_scale(self, pool_file, capsys):
        code = main(["--data", str(pool_file), "--job-id", "job_001", "--min-score", "150"])
        assert code == 0
        data = json.loads(capsys.readouterr().out)
        assert data["results"] == []
        assert data["summary"]["total"] == 0

    def test_unknown_job(self, pool_file):
        assert main(["--data", str(pool_file), "--job-id", "missing"]) == 1

    def test_missing_data_file(self, tmp_path):
        assert main(["--data", str(tmp_path / "nope.yaml"), "--job-id", "job_001"]) == 1
