# prompter/prompter.py

import io
import sys
import uuid
from typing import Optional

from core.config_schema import PrompterConfig
from utils.structured_logger import log_event, redact_answer

# Unicode White_Space property; the \x1c-\x1f separators are not included
WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def ensure_ends_with_space(question: str) -> str:
    """
    Appends a single space unless the question already ends with one.
    Only a trailing ASCII space counts; tabs and newlines do not.
    """
    if question.endswith(" "):
        return question
    return question + " "


def _is_binary(stream) -> bool:
    return isinstance(stream, (io.RawIOBase, io.BufferedIOBase))


def _write_all(writer, data: bytes):
    view = memoryview(data)
    while view:
        written = writer.write(view)
        if written is None:
            raise BlockingIOError("writer is not ready to accept the question")
        view = view[written:]


class Prompter:
    """
    Asks one question at a time over a reader/writer pair.

    Defaults to sys.stdin / sys.stdout. The streams belong to the caller's
    lifetime management; the prompter never closes them. Not safe for
    concurrent ask() calls on the same instance.
    """

    def __init__(self, reader=None, writer=None, config: PrompterConfig | None = None):
        self.reader = reader if reader is not None else sys.stdin
        self.writer = writer if writer is not None else sys.stdout
        self.config = config or PrompterConfig()
        self.prompter_id = str(uuid.uuid4())

    def ask(self, question: str) -> Optional[str]:
        """
        Writes the question, flushes, reads one line.

        Returns None at end-of-input, otherwise the stripped line (possibly "").
        Stream errors are logged and re-raised.
        """
        question = ensure_ends_with_space(question)

        try:
            self._write(question)
            self.writer.flush()
        except (OSError, ValueError) as e:
            self._log("write_failed", input_data=question, outcome="error", extra={"error": repr(e)})
            raise
        self._log("question_written", input_data=question)

        try:
            line = self._read_line()
        except (OSError, ValueError) as e:
            self._log("read_failed", outcome="error", extra={"error": repr(e)})
            raise

        if line is None:
            self._log("end_of_input")
            return None

        answer = line.strip(WHITESPACE)
        self._log("answer_received", output_data=self._loggable(answer))
        return answer

    def _write(self, question: str):
        if _is_binary(self.writer):
            _write_all(self.writer, question.encode("utf-8"))
        else:
            self.writer.write(question)

    def _read_line(self) -> Optional[str]:
        line = self.reader.readline()
        if not line:
            return None
        if isinstance(line, (bytes, bytearray)):
            # strict: invalid UTF-8 raises UnicodeDecodeError
            return line.decode("utf-8")
        return line

    def _loggable(self, answer: str):
        if self.config.logging.redact_answers:
            return redact_answer(answer)
        return answer

    def _log(self, step: str, **kwargs):
        try:
            log_event(self.config.logging, self.prompter_id, step, **kwargs)
        except OSError:
            # event log failures never change what ask() returns or raises
            pass
