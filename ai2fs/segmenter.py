"""
Stream Segmenter

Walks the transcript once, front to back. Marker lines open a new file
session; every other line is appended verbatim to the open session. A
session is written to disk when the next marker arrives or the input ends.

States:
- Idle: no open session, content lines are skipped.
- Collecting: one open session, content lines are buffered.
"""

import sys

from ai2fs import config
from ai2fs.markers import extract_path
from ai2fs.utils.errors import OutputCreateError
from ai2fs.utils.filesystem import resolve_output_path, write_file
from ai2fs.utils.logger import setup_logger

logger = setup_logger("StreamSegmenter")


class FileSession:
    """
    The file currently being assembled.
    Lines are kept as read (line endings included); the list grows without
    any fixed limit, so file size is bounded only by memory.
    """

    def __init__(self, path, target):
        self.path = path
        self.target = target
        self.lines = []

    def append(self, line):
        self.lines.append(line)

    def content(self):
        return "".join(self.lines)


class SegmentationReport:
    def __init__(self):
        self.created = []
        self.failed = []  # (path, reason)
        self.skipped_lines = 0

    @property
    def ok(self):
        return not self.failed

    def __repr__(self):
        return (f"SegmentationReport(created={len(self.created)}, "
                f"failed={len(self.failed)}, skipped_lines={self.skipped_lines})")


class StreamSegmenter:
    def __init__(self, root, allow_unsafe_paths=None, max_line_length=None,
                 encoding=None, out=None, err=None):
        self.root = root
        self.allow_unsafe_paths = config.ALLOW_UNSAFE_PATHS if allow_unsafe_paths is None else allow_unsafe_paths
        self.max_line_length = max_line_length or config.MAX_LINE_LENGTH
        self.encoding = encoding or config.INPUT_ENCODING
        # Console streams, resolved lazily so pytest's capsys sees the output
        self._out = out
        self._err = err
        self.session = None
        self.report = SegmentationReport()

    @property
    def out(self):
        return self._out or sys.stdout

    @property
    def err(self):
        return self._err or sys.stderr

    @property
    def state(self):
        return "collecting" if self.session else "idle"

    def feed(self, line):
        """Consumes one raw line."""
        path = extract_path(line, self.max_line_length)
        if path is not None:
            self._close_session()
            self._open_session(path)
        elif self.session:
            self.session.append(line)
        else:
            self.report.skipped_lines += 1

    def finish(self):
        """End of input: writes the last open session, if any."""
        self._close_session()
        logger.info(
            f"Segmentation finished: {len(self.report.created)} created, {len(self.report.failed)} failed",
            extra={"files_created": len(self.report.created), "files_failed": len(self.report.failed),
                   "skipped_lines": self.report.skipped_lines}
        )
        return self.report

    def process(self, lines):
        """Runs a whole transcript (any iterable of lines) through the segmenter."""
        for line in lines:
            self.feed(line)
        return self.finish()

    def _open_session(self, path):
        target, error = resolve_output_path(self.root, path, allow_unsafe=self.allow_unsafe_paths)
        if error:
            # Content up to the next marker has nowhere to go and is dropped
            self._report_failure(OutputCreateError(path, error))
            return
        self.session = FileSession(path, target)
        logger.debug(f"Opened session for {path}", extra={"path": path})

    def _close_session(self):
        session, self.session = self.session, None
        if session is None:
            return
        try:
            write_file(session.target, session.content(), encoding=self.encoding)
        except OutputCreateError as e:
            self._report_failure(e, rel_path=session.path)
            return
        self.report.created.append(session.path)
        print(f"Created file: {session.path}", file=self.out)

    def _report_failure(self, error, rel_path=None):
        rel_path = rel_path or error.path
        self.report.failed.append((rel_path, error.reason))
        logger.error(f"❌ {error}", extra={"path": rel_path, "reason": error.reason})
        print(str(error), file=self.err)
