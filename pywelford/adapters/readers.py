import logging
import os

from pywelford.core.ports.reader import ReaderPort

logger = logging.getLogger(__name__)


class FileReader(ReaderPort):
    def __init__(self, filename: str, mode: str = "rb"):
        """
        File reader adapter.
            :param filename: Path to the file
            :param mode: File mode, default is read-binary
        """
        if not os.path.exists(filename):
            raise FileNotFoundError(f"File {filename} does not exist")
        logger.debug("Opening observations file %s", filename)
        self.file = open(filename, mode)

    def read(self, size: int = -1) -> bytes:
        """
        Read up to `size` bytes from the file. If size=-1, read entire file.
        """
        return self.file.read(size)

    def close(self):
        self.file.close()
