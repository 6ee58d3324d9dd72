"""Action dispatcher: run/bundle selection, flag forwarding and failure policy."""
from __future__ import annotations

import os
import unittest
from pathlib import Path
from unittest.mock import Mock

SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in os.sys.path:
    os.sys.path.insert(0, str(SRC_ROOT))

from denotag.constants import DEFAULT_RUN_COMMAND  # noqa: E402
from denotag.core.models import RunRequest  # noqa: E402
from denotag.errors import BackendError  # noqa: E402
from denotag.runtime.dispatcher import ActionDispatcher, decode_output  # noqa: E402
from denotag.runtime.options import DenoTagOptions  # noqa: E402

BASE_CMD = ["deno", "run", "--allow-read", "--allow-run"]


def _bundler_never_called(*_args, **_kwargs):
    raise AssertionError("bundler should not be called")


class PlanTests(unittest.TestCase):
    def test_defaults_to_run_with_empty_file(self) -> None:
        self.assertEqual(ActionDispatcher.plan({}), ("run", "", []))

    def test_run_strips_quotes_and_collects_flags(self) -> None:
        plan = ActionDispatcher.plan({"run": '"file.ts"', "arg1": '"test"', "ok": '"true"'})
        self.assertEqual(plan, ("run", "file.ts", ['arg1="test"', 'ok="true"']))

    def test_bundle_switches_action(self) -> None:
        self.assertEqual(ActionDispatcher.plan({"bundle": '"b.ts"'}), ("bundle", "b.ts", []))

    def test_flags_keep_encounter_order(self) -> None:
        _, _, flags = ActionDispatcher.plan({"z": '"1"', "run": '"f.ts"', "a": '"2"'})
        self.assertEqual(flags, ['z="1"', 'a="2"'])


class RunDispatchTests(unittest.IsolatedAsyncioTestCase):
    async def test_runner_receives_base_command_file_and_flags(self) -> None:
        runner = Mock(return_value=b"")
        dispatcher = ActionDispatcher(DenoTagOptions(runner=runner, bundler=_bundler_never_called))

        await dispatcher.dispatch({"run": '"file.ts"', "arg1": '"test"', "arg2": '"something"'})

        request = runner.call_args.args[0]
        self.assertIsInstance(request, RunRequest)
        self.assertEqual(request.argv, [*BASE_CMD, "file.ts", 'arg1="test"', 'arg2="something"'])
        self.assertEqual(request.capture, "piped")

    async def test_default_run_command(self) -> None:
        self.assertEqual(list(DEFAULT_RUN_COMMAND), BASE_CMD)

    async def test_custom_run_command(self) -> None:
        runner = Mock(return_value="ok")
        opts = DenoTagOptions(runner=runner, bundler=_bundler_never_called).with_overrides(
            run_command=["python3", "-u"]
        )
        out = await ActionDispatcher(opts).dispatch({"run": '"s.py"'})
        self.assertEqual(out, "ok")
        self.assertEqual(runner.call_args.args[0].argv, ["python3", "-u", "s.py"])

    async def test_async_runner_bytes_are_decoded(self) -> None:
        async def runner(request: RunRequest) -> bytes:
            return "héllo\n".encode("utf-8")

        dispatcher = ActionDispatcher(DenoTagOptions(runner=runner, bundler=_bundler_never_called))
        self.assertEqual(await dispatcher.dispatch({"run": '"f.ts"'}), "héllo\n")

    async def test_runner_failure_degrades_to_empty_output(self) -> None:
        runner = Mock(side_effect=RuntimeError("boom"))
        dispatcher = ActionDispatcher(DenoTagOptions(runner=runner, bundler=_bundler_never_called))
        with self.assertLogs("denotag", level="ERROR") as cm:
            out = await dispatcher.dispatch({"run": '"f.ts"'})
        self.assertEqual(out, "")
        self.assertEqual(runner.call_count, 1)
        self.assertIn("boom", "\n".join(cm.output))

    async def test_missing_action_runs_empty_path_and_warns(self) -> None:
        runner = Mock(return_value=b"")
        dispatcher = ActionDispatcher(DenoTagOptions(runner=runner, bundler=_bundler_never_called))
        with self.assertLogs("denotag", level="WARNING"):
            await dispatcher.dispatch({"flag": '"true"'})
        self.assertEqual(runner.call_args.args[0].argv, [*BASE_CMD, "", 'flag="true"'])


class BundleDispatchTests(unittest.IsolatedAsyncioTestCase):
    async def test_bundler_receives_file_sources_and_options(self) -> None:
        bundler = Mock(return_value=(None, "export const x = 1;"))
        opts = DenoTagOptions(
            runner=Mock(),
            bundler=bundler,
            bundle_sources={"/a.ts": "x"},
            bundle_options={"minify": True},
        )
        out = await ActionDispatcher(opts).dispatch({"bundle": '"test.ts"', "ignored": '"1"'})

        self.assertEqual(out, "export const x = 1;")
        bundler.assert_called_once_with("test.ts", {"/a.ts": "x"}, {"minify": True})
        opts.runner.assert_not_called()

    async def test_diagnostics_are_ignored(self) -> None:
        async def bundler(file, sources=None, options=None):
            return (["warning: unused"], "code")

        out = await ActionDispatcher(DenoTagOptions(runner=Mock(), bundler=bundler)).dispatch({"bundle": '"b.ts"'})
        self.assertEqual(out, "code")

    async def test_bundler_failure_propagates(self) -> None:
        bundler = Mock(side_effect=BackendError("bad bundle"))
        dispatcher = ActionDispatcher(DenoTagOptions(runner=Mock(), bundler=bundler))
        with self.assertRaises(BackendError):
            await dispatcher.dispatch({"bundle": '"b.ts"'})


class DecodeOutputTests(unittest.TestCase):
    def test_values(self) -> None:
        self.assertEqual(decode_output(None), "")
        self.assertEqual(decode_output(b"a\n"), "a\n")
        self.assertEqual(decode_output(bytearray(b"z")), "z")
        self.assertEqual(decode_output("s"), "s")
        self.assertEqual(decode_output(b"\xff"), "\ufffd")


if __name__ == "__main__":
    unittest.main()
