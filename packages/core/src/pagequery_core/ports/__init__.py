from .data_source import IDataSource
from .unit_of_work import UnitOfWork

__all__ = ["IDataSource", "UnitOfWork"]
