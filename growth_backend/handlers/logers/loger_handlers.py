import logging
from typing import Optional

DEFAULT_LOGER_NAME = "growthLoger"
LOG_FORMAT = "[%(asctime)s] {%(name)s}  %(levelname)s %(funcName)s(%(lineno)d) - %(message)s"


class LogerHandler:
    def __init__(self, logsFilePath: Optional[str] = None, logerName: str = DEFAULT_LOGER_NAME, logLevel: str = 'INFO'):
        self.logerName = logerName
        self.logerClient = self.__setLogsFormat(logerName, logsFilePath, logLevel)

    def __setLogsFormat(self, logerName, fileName, logLevel):
        myLoger = logging.getLogger(logerName)

        if myLoger.handlers:
            return myLoger

        myLoger.setLevel(level=logLevel.upper())

        formatter = logging.Formatter(LOG_FORMAT)

        consoleHandler = logging.StreamHandler()
        consoleHandler.setLevel(logging.DEBUG)
        consoleHandler.setFormatter(formatter)
        myLoger.addHandler(consoleHandler)

        # File output is optional: the pipeline itself never touches disk
        if fileName:
            fileLogHandler = logging.FileHandler(filename=fileName, mode='a', encoding="UTF-8")
            fileLogHandler.setFormatter(formatter)
            fileLogHandler.setLevel(logging.INFO)
            myLoger.addHandler(fileLogHandler)

        return myLoger

    def get_child(self, suffix: str) -> logging.Logger:
        return self.logerClient.getChild(suffix)


def get_loger(logerHandler: Optional[LogerHandler], suffix: str, logerName: str = DEFAULT_LOGER_NAME) -> logging.Logger:
    # Handlers may be wired without a LogerHandler (tests, ad hoc use)
    if logerHandler is None:
        return logging.getLogger(f"{logerName}.{suffix}")
    return logerHandler.get_child(suffix)
