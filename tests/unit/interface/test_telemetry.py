"""Unit tests for ProjectTelemetry."""

from solid_base_linter.interface.telemetry import ProjectTelemetry


def test_messages_go_to_stderr(capsys) -> None:
    telemetry = ProjectTelemetry("SOLID-BASE", "cyan", "Online")
    telemetry.handshake()
    telemetry.step("Parsing")
    telemetry.warning("Careful")
    telemetry.error("Broken")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "[SOLID-BASE] Online" in captured.err
    assert "[SOLID-BASE] Parsing" in captured.err
    assert "WARNING: Careful" in captured.err
    assert "ERROR: Broken" in captured.err
