"""夏曆例外定義"""


class CalendarError(Exception):
    """曆法相關錯誤的基底類別"""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class InvalidDateError(CalendarError):
    """日期無法由曆法轉換器解析

    例如指定年份不存在的閏月、超出天數的日子，
    或超出轉換器支援範圍的年份。
    """
    pass
