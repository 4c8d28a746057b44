import sys

from ai2fs import config
from ai2fs.segmenter import StreamSegmenter
from ai2fs.utils.constants import PROGRAM_NAME, VERSION
from ai2fs.utils.errors import UsageError, InputOpenError, InputReadError
from ai2fs.utils.filesystem import prepare_root
from ai2fs.utils.logger import setup_logger

logger = setup_logger("CLI")


def parse_args(argv):
    if len(argv) != 1:
        raise UsageError(f"Usage: {PROGRAM_NAME} <input_file>")
    return argv[0]


def open_input(path, encoding=None):
    # newline='' hands lines over with their original endings (\n, \r\n)
    try:
        return open(path, 'r', encoding=encoding or config.INPUT_ENCODING,
                    errors='surrogateescape', newline='')
    except (OSError, ValueError, LookupError) as e:
        raise InputOpenError(path, getattr(e, "strerror", None) or str(e)) from e


def run(input_path, root=None):
    """
    Splits one transcript into files under root.
    Returns the SegmentationReport.
    Raises InputOpenError if the input cannot be opened, InputReadError if reading it fails midway.
    """
    root = root or config.ROOT_FOLDER

    # Open the input first: an unreadable transcript must not leave an empty root behind
    input_file = open_input(input_path)
    with input_file:
        prepare_root(root)
        print(f"Root folder '{root}' created.")
        logger.info(f"🚀 {PROGRAM_NAME} {VERSION} processing {input_path}",
                    extra={"version": VERSION, "input": input_path, "root": root})

        segmenter = StreamSegmenter(root)
        try:
            return segmenter.process(input_file)
        except OSError as e:
            # Keep what was collected so far, then give up on the input
            segmenter.finish()
            raise InputReadError(input_path, e.strerror or str(e)) from e


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    try:
        input_path = parse_args(argv)
    except UsageError as e:
        print(str(e), file=sys.stderr)
        return 1

    try:
        report = run(input_path)
    except (InputOpenError, InputReadError) as e:
        logger.error(f"❌ {e}", extra={"input": e.path, "reason": e.reason})
        print(str(e), file=sys.stderr)
        return 1
    except OSError as e:
        logger.error(f"❌ Cannot prepare output root: {e}")
        print(f"Error creating root folder: {e}", file=sys.stderr)
        return 1

    print(f"Done: {len(report.created)} file(s) created, {len(report.failed)} failed.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
