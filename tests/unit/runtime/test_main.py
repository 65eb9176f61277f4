import contextlib
import logging
import sys
import types
import unittest
from unittest import mock

import typer
from typer.testing import CliRunner

from execution import Request
from execution.observability import null_observability as null_execution_observability
from puzzle_input import CachedInputProvider
from puzzle_input.observability import null_observability as null_input_observability
from runtime import main as cli
from runtime.observability import ObservabilityBundle, RuntimeObservability
from runtime.wiring import load_solver_mapping
from solution import DaySolver, SolverRegistry


class Echo(DaySolver):
    def part_1(self, puzzle_input):
        return puzzle_input

    def part_2(self, puzzle_input):
        return None

    def part_1_sample_input(self):
        return "abc"

    def part_1_sample_answer(self):
        return "abc"


def _bundle(log_dir: str) -> ObservabilityBundle:
    return ObservabilityBundle(
        runtime=RuntimeObservability(logger=logging.getLogger("tests.runtime")),
        execution=null_execution_observability(),
        puzzle_input=null_input_observability(),
    )


class TestResolveTarget(unittest.TestCase):
    def _resolve(self, **overrides) -> cli.Target:
        values = {"years": None, "year": None, "day": None, "part": None, "latest": None}
        values.update(overrides)
        return cli.resolve_target(**values)

    def test_year_range(self) -> None:
        self.assertEqual(self._resolve(years="2015-2017").years, (2015, 2016, 2017))
        self.assertEqual(self._resolve(years="2020").years, (2020,))

    def test_bad_year_range(self) -> None:
        for value in ("abc", "2017-2015"):
            with self.assertRaises(typer.BadParameter):
                self._resolve(years=value)

    def test_exactly_one_year_selector(self) -> None:
        with self.assertRaises(typer.BadParameter):
            self._resolve()
        with self.assertRaises(typer.BadParameter):
            self._resolve(years="2015", year=2015)

    def test_part_requires_day(self) -> None:
        with self.assertRaises(typer.BadParameter):
            self._resolve(year=2022, part=1)

    def test_latest_normalised_and_exclusive(self) -> None:
        self.assertEqual(self._resolve(year=2022, latest=" Part ").latest, "part")
        with self.assertRaises(typer.BadParameter):
            self._resolve(year=2022, latest="week")
        with self.assertRaises(typer.BadParameter):
            self._resolve(year=2022, day=1, latest="day")


class TestDispatch(unittest.TestCase):
    def test_selects_handler_method(self) -> None:
        handler = mock.Mock()
        cases = [
            (Request.CHECK_AND_RUN, cli.Target(year=2022), "run_year", (2022,)),
            (Request.CHECK_ONLY, cli.Target(year=2022, day=5), "check_day", (2022, 5)),
            (Request.CHECK_AND_RUN, cli.Target(year=2022, day=5, part=2), "run_part", (2022, 5, 2)),
            (Request.CHECK_ONLY, cli.Target(year=2022, latest="day"), "check_most_recent_day", (2022,)),
            (Request.CHECK_AND_RUN, cli.Target(year=2022, latest="part"), "run_most_recent_part", (2022,)),
            (Request.CHECK_ONLY, cli.Target(years=(2015, 2016)), "check_year_range", ((2015, 2016),)),
        ]
        for request, target, method, expected in cases:
            cli.dispatch(handler, request, target)
            getattr(handler, method).assert_called_with(*expected)


class TestLoadSolverMapping(unittest.TestCase):
    def test_mapping_attribute_becomes_registry(self) -> None:
        module = types.ModuleType("fake_solutions")
        module.SOLVERS = {(2022, 1): Echo}
        with mock.patch.dict(sys.modules, {"fake_solutions": module}):
            mapper = load_solver_mapping("fake_solutions:SOLVERS")
        self.assertIsInstance(mapper, SolverRegistry)
        self.assertIsNotNone(mapper(2022, 1))

    def test_bad_spec_rejected(self) -> None:
        with self.assertRaises(ValueError):
            load_solver_mapping("no_colon_here")

    def test_missing_attribute_rejected(self) -> None:
        module = types.ModuleType("fake_solutions")
        with mock.patch.dict(sys.modules, {"fake_solutions": module}):
            with self.assertRaises(ValueError):
                load_solver_mapping("fake_solutions:SOLVERS")


class TestCli(unittest.TestCase):
    def _invoke(self, args, *, stub_mapping=True):
        registry = SolverRegistry({(2022, 1): Echo})
        with contextlib.ExitStack() as stack:
            if stub_mapping:
                stack.enter_context(
                    mock.patch.object(cli, "load_solver_mapping", return_value=registry)
                )
            stack.enter_context(
                mock.patch.object(cli, "bootstrap_observability", side_effect=_bundle)
            )
            stack.enter_context(mock.patch.object(cli, "_token_prompt", return_value=None))
            self.close = stack.enter_context(mock.patch.object(CachedInputProvider, "close"))
            return CliRunner().invoke(cli.app, args)

    def test_check_day_prints_report(self) -> None:
        result = self._invoke(["check", "--solutions", "m:a", "--year", "2022", "--day", "1"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Testing", result.output)
        self.assertIn("Part One - Passed", result.output)

    def test_invalid_index_exits_with_usage_status(self) -> None:
        result = self._invoke(["run", "--solutions", "m:a", "--year", "2014"])
        self.assertEqual(result.exit_code, 2)
        self.assertIn("error:", result.output)
        self.assertIn("2014", result.output)

    def test_year_range_skips_invalid_years(self) -> None:
        result = self._invoke(["check", "--solutions", "m:a", "--years", "2014-2015"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("skipped:", result.output)
        self.assertIn("2015", result.output)

    def test_all_invalid_range_aborts(self) -> None:
        result = self._invoke(["check", "--solutions", "m:a", "--years", "2010-2011"])
        self.assertEqual(result.exit_code, 2)
        self.assertIn("no valid years requested", result.output)

    def test_usage_errors_exit_with_usage_status(self) -> None:
        result = self._invoke(["check", "--solutions", "m:a", "--year", "2022", "--part", "1"])
        self.assertEqual(result.exit_code, 2)

    def test_non_solver_in_mapping_is_usage_error(self) -> None:
        module = types.ModuleType("fake_solutions")
        module.SOLVERS = {(2022, 5): object}
        with mock.patch.dict(sys.modules, {"fake_solutions": module}):
            result = self._invoke(
                ["check", "--solutions", "fake_solutions:SOLVERS", "--year", "2022"],
                stub_mapping=False,
            )
        self.assertEqual(result.exit_code, 2)
        self.assertNotIsInstance(result.exception, TypeError)

    def test_input_provider_closed_after_report(self) -> None:
        result = self._invoke(["check", "--solutions", "m:a", "--year", "2022", "--day", "1"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.close.assert_called_once_with()

    def test_input_provider_closed_on_index_error(self) -> None:
        result = self._invoke(["run", "--solutions", "m:a", "--year", "2014"])
        self.assertEqual(result.exit_code, 2)
        self.close.assert_called_once_with()


class TestTokenPrompt(unittest.TestCase):
    def test_no_prompt_without_terminal(self) -> None:
        with mock.patch.object(cli.sys, "stdin") as stdin:
            stdin.isatty.return_value = False
            self.assertIsNone(cli._token_prompt())

    def test_prompt_hides_input(self) -> None:
        with mock.patch.object(cli.sys, "stdin") as stdin:
            stdin.isatty.return_value = True
            prompt = cli._token_prompt()
        with mock.patch.object(cli.typer, "prompt", return_value="secret") as typer_prompt:
            self.assertEqual(prompt(), "secret")
        typer_prompt.assert_called_once_with("Session token", hide_input=True)


if __name__ == "__main__":
    unittest.main()
