"""Tests for the command-line entry point."""

from main import main


class TestPreview:
    def test_lunch_break(self, capsys):
        code = main([
            "preview", "--start", "09:00", "--end", "18:00",
            "--break-start", "13:00", "--break-end", "14:00", "--interval", "30",
        ])
        out = capsys.readouterr().out
        assert code == 0
        assert "Slots per day: 16 (30-minute interval)" in out
        assert "Working time:  8h 0m" in out

    def test_invalid_schedule(self):
        assert main(["preview", "--start", "18:00", "--end", "09:00"]) == 2

    def test_half_specified_break(self):
        assert main(["preview", "--break-start", "13:00"]) == 2


class TestDates:
    def test_booking_window(self, capsys):
        assert main(["dates"]) == 0
        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 3
        assert "Today" in lines[0]

    def test_reschedule_window(self, capsys):
        assert main(["dates", "--reschedule"]) == 0
        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 7
        assert "Today" not in lines[0]
