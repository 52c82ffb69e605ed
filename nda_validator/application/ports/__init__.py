from .services import FileReaderPort, LoggerPort, SchemaRepositoryPort

__all__ = ["FileReaderPort", "LoggerPort", "SchemaRepositoryPort"]
