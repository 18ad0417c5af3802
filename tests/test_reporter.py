import io

from rich.console import Console

from cwget.progress import ProgressReporter


def test_messages_go_to_the_log_sink():
    lines = []
    reporter = ProgressReporter(log_action=lines.append)

    reporter.log("Fetching page 1 (1/2).")
    reporter.display_warning("Couldn't delete unconverted page.")
    reporter.display_error("Failed during download", ValueError("boom"))

    assert lines == [
        "Fetching page 1 (1/2).",
        "Warning: Couldn't delete unconverted page.",
        "Error: Failed during download",
        "Details: boom",
    ]


def test_console_output_escapes_markup():
    buffer = io.StringIO()
    reporter = ProgressReporter(Console(file=buffer, width=120))

    reporter.display_info("Fetching series [Special] Edition.")

    assert "Fetching series [Special] Edition." in buffer.getvalue()


def test_summary_counts():
    buffer = io.StringIO()
    reporter = ProgressReporter(Console(file=buffer, width=120))
    reporter.record_chapter()
    reporter.record_page(skipped=False)
    reporter.record_page(skipped=True)
    reporter.record_page(skipped=True)

    reporter.display_summary()

    output = buffer.getvalue()
    assert (reporter.chapters_processed, reporter.pages_downloaded, reporter.pages_skipped) == (1, 1, 2)
    assert "Pages Skipped" in output
    assert "Download Summary" in output
