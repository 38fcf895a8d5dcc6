import io
import os
import tempfile
import unittest
from unittest.mock import patch, MagicMock

import shell
from command import ExecResult


class TestReadCommand(unittest.TestCase):
    def test_read_command_uses_prompt(self):
        with patch("builtins.input", return_value="echo hi") as mock_input:
            self.assertEqual("echo hi", shell.read_command("$ "))
        mock_input.assert_called_once_with("$ ")

    def test_read_command_eof(self):
        with patch("builtins.input", side_effect=EOFError):
            with self.assertRaises(EOFError):
                shell.read_command()


class TestShellRun(unittest.TestCase):
    def setUp(self):
        self.shell = shell.Shell(prompt="test> ")

    def test_run_executes_each_line_until_eof(self):
        with patch.object(shell, "read_command", side_effect=["echo hi", "ls", EOFError]) as mock_read, \
             patch.object(shell, "execute", return_value=ExecResult(status=0)) as mock_exec, \
             patch("sys.stdout", io.StringIO()):
            rc = self.shell.run()

        self.assertEqual(0, rc)
        self.assertEqual(2, mock_exec.call_count)
        mock_read.assert_called_with("test> ")

    def test_run_passes_segments_to_execute(self):
        with patch.object(shell, "read_command", side_effect=["a | b", EOFError]), \
             patch.object(shell, "execute", return_value=ExecResult()) as mock_exec, \
             patch("sys.stdout", io.StringIO()):
            self.shell.run()

        segments, builtins = mock_exec.call_args.args
        self.assertEqual([["a"], ["b"]], [s.argv for s in segments])
        self.assertIs(self.shell.builtins, builtins)

    def test_run_stops_when_continuation_is_zero(self):
        with patch.object(shell, "read_command", side_effect=["exit", "echo never"]) as mock_read:
            rc = self.shell.run()

        self.assertEqual(0, rc)
        self.assertEqual(1, mock_read.call_count)

    def test_run_eof_prints_newline(self):
        out = io.StringIO()
        with patch.object(shell, "read_command", side_effect=EOFError), patch("sys.stdout", out):
            rc = self.shell.run()
        self.assertEqual(0, rc)
        self.assertEqual("\n", out.getvalue())

    def test_run_reports_errors_and_continues(self):
        err = io.StringIO()
        with patch.object(shell, "read_command", side_effect=['echo "oops', "| wc", "exit"]) as mock_read, \
             patch("sys.stderr", err):
            rc = self.shell.run()

        self.assertEqual(0, rc)
        self.assertEqual(3, mock_read.call_count)
        self.assertIn("minishell: syntax error: unterminated quote", err.getvalue())
        self.assertIn("minishell: syntax error: missing command near '|'", err.getvalue())

    def test_run_reports_process_errors_and_continues(self):
        err = io.StringIO()
        failing = MagicMock(side_effect=shell.ShellError("fork failed: no memory"))
        with patch.object(shell, "read_command", side_effect=["true", EOFError]), \
             patch.object(shell, "execute", failing), \
             patch("sys.stderr", err), patch("sys.stdout", io.StringIO()):
            rc = self.shell.run()

        self.assertEqual(0, rc)
        self.assertIn("minishell: fork failed: no memory", err.getvalue())

    def test_run_keyboard_interrupt_continues(self):
        with patch.object(shell, "read_command", side_effect=[KeyboardInterrupt, EOFError]), \
             patch("sys.stdout", io.StringIO()):
            rc = self.shell.run()
        self.assertEqual(0, rc)

    def test_lenient_quotes(self):
        sh = shell.Shell(strict_quotes=False)
        with patch.object(shell, "execute", return_value=ExecResult()) as mock_exec:
            sh.run_line("echo 'half")
        segments, _ = mock_exec.call_args.args
        self.assertEqual(["echo", "half"], segments[0].argv)


class TestShellEndToEnd(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmpdir.cleanup)
        self.cwd = os.getcwd()
        os.chdir(self.tmpdir.name)
        self.addCleanup(lambda: os.chdir(self.cwd))
        self.shell = shell.Shell()

    def read_file(self, name: str) -> str:
        with open(name, "r", encoding="utf-8") as f:
            return f.read()

    def test_run_line_tracks_last_status(self):
        self.assertEqual(1, self.shell.run_line("false"))
        self.assertEqual(1, self.shell.last_status)
        self.shell.run_line("true | true")
        self.assertEqual(0, self.shell.last_status)

    def test_builtin_keeps_last_status(self):
        self.shell.run_line("false")
        with patch("sys.stdout", io.StringIO()):
            self.shell.run_line("echo hi")
        self.assertEqual(1, self.shell.last_status)

    def test_session(self):
        lines = [
            "echo one > log.txt",
            "echo two >> log.txt",
            "cat < log.txt | sort -r > sorted.txt",
            "exit",
        ]
        with patch.object(shell, "read_command", side_effect=lines):
            rc = self.shell.run()

        self.assertEqual(0, rc)
        self.assertEqual("one\ntwo\n", self.read_file("log.txt"))
        self.assertEqual("two\none\n", self.read_file("sorted.txt"))

    def test_cd_persists_between_lines(self):
        os.mkdir("sub")
        self.shell.run_line("cd sub")
        self.shell.run_line("pwd > where.txt")
        self.assertEqual(os.getcwd() + "\n", self.read_file("where.txt"))
        self.assertEqual("sub", os.path.basename(os.getcwd()))


if __name__ == "__main__":
    unittest.main()
