"""Tests for report and rename-log adapters."""

from pathlib import Path

from verificile.app.adapters import NullRenameLog, NullReport, TextRenameLog, TsvAnomalyReport
from verificile.core.models import AnomalyRecord


def _anomaly(path: str = "/data/image.jpg") -> AnomalyRecord:
    return AnomalyRecord(
        path=path,
        content_type="image/png",
        actual_extension="jpg",
        expected_extensions="png",
    )


def test_tsv_report_layout(temp_dir: Path, fixed_clock):
    report_path = temp_dir / "out" / "anomalies.tsv"
    report = TsvAnomalyReport(report_path, user="thinko", clock=fixed_clock)

    report.open()
    report.write(_anomaly())
    report.write(
        AnomalyRecord(
            path="/data/scan",
            content_type="application/pdf",
            actual_extension="",
            expected_extensions="pdf",
        )
    )

    lines = report_path.read_text(encoding="utf-8").splitlines()
    assert lines == [
        "# Generated by Verificile on 2025-05-15 21:31:37 by thinko",
        "File Path\tDetected Type\tActual Extension\tExpected Extensions",
        "/data/image.jpg\timage/png\tjpg\tpng",
        "/data/scan\tapplication/pdf\t\tpdf",
    ]
    assert report.count() == 2


def test_tsv_report_joins_multiple_expected(temp_dir: Path, fixed_clock):
    report = TsvAnomalyReport(temp_dir / "a.tsv", user="u", clock=fixed_clock)
    report.open()
    report.write(
        AnomalyRecord(
            path="/data/photo.png",
            content_type="image/jpeg",
            actual_extension="png",
            expected_extensions="jpg,jpeg",
        )
    )

    last_line = (temp_dir / "a.tsv").read_text(encoding="utf-8").splitlines()[-1]
    assert last_line.split("\t")[-1] == "jpg,jpeg"


def test_tsv_report_count_and_discard(temp_dir: Path, fixed_clock):
    report_path = temp_dir / "anomalies.tsv"
    report = TsvAnomalyReport(report_path, user="u", clock=fixed_clock)

    assert report.count() == 0
    report.open()
    assert report.count() == 0

    report.discard()
    assert not report_path.exists()
    report.discard()


def test_rename_log_is_lazy_and_append_only(temp_dir: Path, fixed_clock):
    log_path = temp_dir / "renamed.log"
    rename_log = TextRenameLog(log_path, clock=fixed_clock)

    assert not log_path.exists()
    entry = rename_log.append(Path("/data/image.jpg"), Path("/data/image.png"))
    rename_log.append(Path("/data/a.txt"), Path("/data/a.pdf"))

    assert rename_log.count == 2
    assert entry.format_line() == (
        "2025-05-15 21:31:37 - /data/image.jpg fixed by renaming to /data/image.png"
    )
    assert log_path.read_text(encoding="utf-8").splitlines() == [
        "2025-05-15 21:31:37 - /data/image.jpg fixed by renaming to /data/image.png",
        "2025-05-15 21:31:37 - /data/a.txt fixed by renaming to /data/a.pdf",
    ]


def test_null_sinks_never_touch_disk(temp_dir: Path):
    report = NullReport()
    rename_log = NullRenameLog()

    report.open()
    report.write(_anomaly())
    rename_log.append(temp_dir / "a.jpg", temp_dir / "a.png")
    report.discard()

    assert report.path is None
    assert rename_log.path is None
    assert report.count() == 1
    assert rename_log.count == 1
    assert list(temp_dir.iterdir()) == []
