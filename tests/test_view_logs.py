import view_logs


def test_collect_stats(tmp_path):
    (tmp_path / "status_service_access.log").write_text(
        "2026-01-01 00:00:00 | ACCESS | method=GET | path=/ | status=200 | response_time=0.002s\n"
        "2026-01-01 00:00:01 | ACCESS | method=POST | path=/ | status=200 | response_time=0.004s\n"
        "2026-01-01 00:00:02 | ACCESS | method=GET | path=/health | status=404 | response_time=0.001s\n",
        encoding="utf-8",
    )
    (tmp_path / "status_service.log").write_text(
        "2026-01-01 00:00:00 | status_service.config | INFO | Server started\n"
        "2026-01-01 00:00:03 | status_service.server | ERROR | Failed to bind 0.0.0.0:8080\n",
        encoding="utf-8",
    )

    stats = view_logs.collect_stats(tmp_path)

    assert stats["total_requests"] == 3
    assert stats["root_requests"] == 2
    assert stats["not_found"] == 1
    assert stats["errors"] == 1
    assert stats["warnings"] == 0
    assert stats["response_times"] == [0.002, 0.004, 0.001]


def test_collect_stats_empty_dir(tmp_path):
    stats = view_logs.collect_stats(tmp_path)
    assert stats["total_requests"] == 0
    assert stats["response_times"] == []


def test_tail_file_missing(tmp_path):
    lines = view_logs.tail_file(tmp_path / "absent.log")
    assert lines == [f"Log file not found: {tmp_path / 'absent.log'}\n"]


def test_colorize_error_line():
    line = view_logs.colorize_line("x | ERROR | boom\n")
    assert line == f"{view_logs.Colors.RED}x | ERROR | boom{view_logs.Colors.RESET}"
