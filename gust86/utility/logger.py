"""
Logger Utility
==============

Mirrors terminal output (stdout and stderr) into a run log file.
"""
import sys

from pathlib import Path
from typing  import Optional, TextIO


class TeeStream:
  """
  A stream that writes to a terminal stream and to a shared log file.
  """
  def __init__(
    self,
    terminal : TextIO,
    log_file : TextIO,
  ):
    self.terminal = terminal
    self.log_file = log_file

  def write(self, message: str):
    self.terminal.write(message)
    self.log_file.write(message)
    self.log_file.flush()

  def flush(self):
    self.terminal.flush()
    self.log_file.flush()


class LoggerContext:
  """
  Context to hold logger state for cleanup.
  """
  def __init__(
    self,
    log_file        : TextIO,
    original_stdout : TextIO,
    original_stderr : TextIO,
  ):
    self.log_file        = log_file
    self.original_stdout = original_stdout
    self.original_stderr = original_stderr


def start_logging(
  log_filepath : Path,
) -> LoggerContext:
  """
  Start mirroring stdout and stderr into a log file.

  Input:
  ------
    log_filepath : Path
      Path to the log file. Its folder is created if missing.

  Output:
  -------
    context : LoggerContext
      Context object for stop_logging.
  """
  log_filepath = Path(log_filepath)
  log_filepath.parent.mkdir(parents=True, exist_ok=True)

  log_file = open(log_filepath, 'w', encoding='utf-8')
  context  = LoggerContext(log_file, sys.stdout, sys.stderr)

  sys.stdout = TeeStream(context.original_stdout, log_file)
  sys.stderr = TeeStream(context.original_stderr, log_file)

  return context


def stop_logging(
  context : Optional[LoggerContext],
) -> None:
  """
  Restore the original stdout/stderr and close the log file.
  """
  if context is None:
    return

  sys.stdout = context.original_stdout
  sys.stderr = context.original_stderr
  context.log_file.close()
