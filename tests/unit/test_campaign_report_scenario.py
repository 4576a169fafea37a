import json

from scenarios.campaign_report_scenario import run_campaign_report_scenario

SENDER = "0x0000000000000000000000000000000000010000"
OTHER = "0x0000000000000000000000000000000000020000"
CONTRACT = "0x00a329c0648769a73afac7f9381e08fb43dbea72"


def write_snapshot(tmp_path):
    txs = [
        {"call": {"kind": "sol_call", "name": "f", "args": [1]}, "src": SENDER, "dst": CONTRACT, "gas": 12_500_000},
        {"call": {"kind": "sol_call", "name": "g", "args": []}, "src": OTHER, "dst": CONTRACT, "gas": 12_500_000},
    ]
    snapshot = {
        "seed": 3,
        "tests": [{"type": "property", "name": "echidna_ok", "state": {"kind": "large", "counter": 1},
                   "reproducer": txs}],
        "coverage": {"0xaa": [1]},
    }
    snapshot_file = tmp_path / "snapshot.json"
    snapshot_file.write_text(json.dumps(snapshot), encoding="utf-8")
    return str(snapshot_file)


class TestCampaignReportScenario:
    def test_prints_report(self, tmp_path, capsys):
        report = run_campaign_report_scenario(snapshot_path=write_snapshot(tmp_path), shrink_limit=10)
        assert "echidna_ok: failed!💥  \n  Call sequence, shrinking (1/10):\n" in report
        assert f"    f(1) from: {SENDER}\n    g() from: {OTHER}\n" in report
        assert report.endswith("\nSeed: 3")
        assert report in capsys.readouterr().out

    def test_labels_applied(self, tmp_path):
        label_file = tmp_path / "labels.csv"
        label_file.write_text(f"address,label\n{SENDER},alice\n")
        report = run_campaign_report_scenario(snapshot_path=write_snapshot(tmp_path), label_file=str(label_file))
        assert "f(1) from: alice to: " in report

    def test_missing_snapshot(self, tmp_path, capsys):
        missing = str(tmp_path / "missing.json")
        assert run_campaign_report_scenario(snapshot_path=missing) is None
        assert f"ERROR: Snapshot file not found: {missing}" in capsys.readouterr().out

    def test_malformed_snapshot(self, tmp_path, capsys):
        snapshot_file = tmp_path / "bad.json"
        snapshot_file.write_text(json.dumps({"tests": [{"type": "bogus", "state": {"kind": "passed"}}]}))
        assert run_campaign_report_scenario(snapshot_path=str(snapshot_file)) is None
        assert "CRITICAL ERROR: Malformed campaign snapshot" in capsys.readouterr().out

    def test_snapshot_with_wrong_shape(self, tmp_path, capsys):
        snapshot_file = tmp_path / "bad_shape.json"
        snapshot_file.write_text(json.dumps({"gas_info": {"f()": 5}}))
        assert run_campaign_report_scenario(snapshot_path=str(snapshot_file)) is None
        assert "CRITICAL ERROR: Malformed campaign snapshot" in capsys.readouterr().out
