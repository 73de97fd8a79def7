import logging
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from checkhttp.config import settings
from checkhttp.main import main


class MainTests(unittest.TestCase):
    def test_passes_positional_path_to_runner(self) -> None:
        with patch("checkhttp.main.setup_logging") as setup_mock, patch(
            "checkhttp.main.run"
        ) as run_mock:
            code = main(["/etc/check-http/site.properties"])

        self.assertEqual(code, 0)
        run_mock.assert_called_once_with(["/etc/check-http/site.properties"])
        self.assertEqual(setup_mock.call_args.kwargs["level"], settings.LOG_LEVEL)

    def test_no_arguments(self) -> None:
        with patch("checkhttp.main.setup_logging"), patch("checkhttp.main.run") as run_mock:
            code = main([])

        self.assertEqual(code, 0)
        run_mock.assert_called_once_with([])

    def test_verbose_switches_to_debug(self) -> None:
        with patch("checkhttp.main.setup_logging") as setup_mock, patch("checkhttp.main.run"):
            main(["-v"])

        self.assertEqual(setup_mock.call_args.kwargs["level"], "DEBUG")

    def test_exit_code_is_zero_even_when_run_fails_internally(self) -> None:
        with patch("checkhttp.main.setup_logging"), patch(
            "checkhttp.runner.run_http", side_effect=AssertionError("not reached")
        ):
            code = main(["/nonexistent/check.properties"])

        self.assertEqual(code, 0)

    def test_dash_leading_path_is_passed_to_runner(self) -> None:
        with patch("checkhttp.main.setup_logging"), patch("checkhttp.main.run") as run_mock:
            code = main(["-site.properties"])

        self.assertEqual(code, 0)
        run_mock.assert_called_once_with(["-site.properties"])

    def test_unknown_option_does_not_exit(self) -> None:
        with patch("checkhttp.main.setup_logging"), patch("checkhttp.main.run") as run_mock:
            code = main(["--config", "x.properties"])

        self.assertEqual(code, 0)
        self.assertCountEqual(run_mock.call_args.args[0], ["--config", "x.properties"])

    def test_unopenable_log_file_does_not_stop_the_run(self) -> None:
        root = logging.getLogger()
        saved_handlers = root.handlers[:]
        saved_level = root.level

        def restore() -> None:
            for handler in root.handlers[:]:
                root.removeHandler(handler)
            for handler in saved_handlers:
                root.addHandler(handler)
            root.setLevel(saved_level)

        self.addCleanup(restore)

        with tempfile.TemporaryDirectory() as td:
            log_file = str(Path(td) / "missing-dir" / "check-http.log")
            with patch.object(settings, "LOG_FILE", log_file), patch(
                "checkhttp.main.run"
            ) as run_mock:
                code = main(["site.properties"])

        self.assertEqual(code, 0)
        run_mock.assert_called_once_with(["site.properties"])


if __name__ == "__main__":
    unittest.main()
