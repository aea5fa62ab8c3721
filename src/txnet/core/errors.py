class TxNetError(Exception):
    pass


class DataSourceError(TxNetError):
    pass


class MalformedRecordError(DataSourceError):
    pass
