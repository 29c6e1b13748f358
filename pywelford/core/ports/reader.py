from abc import ABC, abstractmethod


class ReaderPort(ABC):
    @abstractmethod
    def read(self, size: int = -1) -> bytes:
        """read bytes"""
        pass

    @abstractmethod
    def close(self):
        """close reader."""
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
