# tests/test_diagnostics.py

from datetime import date

import pytest

from caljal.diagnostics import leap_years, nowruz_table, pretty_month, round_trip


def test_jalali_month_calendar():
    text = pretty_month.jalali_month_calendar(1403, 12)
    lines = text.splitlines()
    assert lines[0] == "Jalali month  1403-12 اسفند   (2025-02-19 .. 2025-03-20)"
    assert lines[1] == pretty_month.dow_header()
    # 1403-12-01 falls on a Wednesday: four blank cells precede it
    assert lines[3].startswith(" " * (4 * 7) + " 1")
    assert "03-20" in text


def test_jalali_month_calendar_afghan_names():
    text = pretty_month.jalali_month_calendar(1404, 1, names="afghan")
    assert text.splitlines()[0].startswith("Jalali month  1404-01 حمل")


def test_gregorian_month_calendar():
    text = pretty_month.gregorian_month_calendar(2025, 3)
    assert text.splitlines()[0] == "Gregorian month  2025-03  (31 days)"
    assert "12-30" in text
    assert "01-01" in text


def test_build_weeks_pads_to_full_rows():
    weeks = pretty_month.build_weeks(2451545, [(str(i), "") for i in range(1, 31)])
    assert all(len(wk) == 7 for wk in weeks)


def test_nowruz_rows():
    assert nowruz_table.nowruz_rows(1403, 1404) == [
        (1403, "2024-03-20", "Wed", True, True),
        (1404, "2025-03-21", "Fri", False, False),
    ]


def test_nowruz_table_main(capsys):
    assert nowruz_table.main(["--from-year", "1399", "--to-year", "1400", "--persian-weekdays"]) == 0
    out = capsys.readouterr().out
    assert "2020-03-20" in out
    assert "2021-03-21" in out


def test_nowruz_table_rejects_reversed_range():
    with pytest.raises(SystemExit):
        nowruz_table.main(["--from-year", "1404", "--to-year", "1400"])


def test_roundtrip_has_no_failures():
    failures = round_trip.roundtrip_test(
        2000, date(622, 1, 1), date(3700, 12, 31), 1, max_failures=5
    )
    assert failures == 0


def test_round_trip_main(capsys):
    assert round_trip.main(["--N", "300", "--seed", "11"]) == 0
    assert "300 trials, 0 failures" in capsys.readouterr().out


def test_leap_years_agree_inside_a_segment():
    pytest.importorskip("numpy")
    assert leap_years.disagreements(1300, 1600) == []


def test_leap_years_summary(capsys):
    pytest.importorskip("numpy")
    assert leap_years.main(["--no-plot", "--start-year", "1390", "--end-year", "1410"]) == 0
    out = capsys.readouterr().out
    assert "leap (table)    : 5" in out
    assert "disagreements   : 0" in out


def test_leap_years_rejects_out_of_domain_range():
    with pytest.raises(SystemExit):
        leap_years.main(["--no-plot", "--start-year", "3000", "--end-year", "4000"])


def test_leap_years_plot(tmp_path):
    pytest.importorskip("numpy")
    pytest.importorskip("matplotlib")
    out = tmp_path / "barcode.png"
    assert leap_years.main(["--start-year", "1200", "--end-year", "1700", "--out", str(out)]) == 0
    assert out.exists()
