"""夏曆常數表

月名、日名、農曆節日、公曆月名與星期表頭。
皆為唯讀資料，不含任何計算邏輯。
"""

# 農曆月名，索引 0 為正月
MONTH_NAMES = [
    "正月", "二月", "三月", "四月", "五月", "六月",
    "七月", "八月", "九月", "十月", "冬月", "腊月",
]

# 農曆日名，索引 0 為初一
DAY_NAMES = [
    "初一", "初二", "初三", "初四", "初五", "初六", "初七", "初八", "初九", "初十",
    "十一", "十二", "十三", "十四", "十五", "十六", "十七", "十八", "十九", "二十",
    "廿一", "廿二", "廿三", "廿四", "廿五", "廿六", "廿七", "廿八", "廿九", "三十",
]

# 農曆節日，鍵為 "{月}-{日}"，僅適用非閏月
# 除夕依當年腊月天數而定，不在此表
LUNAR_HOLIDAYS: dict[str, str] = {
    "1-1": "春节",
    "1-15": "元宵节",
    "2-2": "龙抬头",
    "5-5": "端午节",
    "7-7": "七夕",
    "7-15": "中元节",
    "8-15": "中秋节",
    "9-9": "重阳节",
    "12-8": "腊八节",
    "12-23": "小年",
}

GREGORIAN_MONTHS = [
    "一月", "二月", "三月", "四月", "五月", "六月",
    "七月", "八月", "九月", "十月", "十一月", "十二月",
]

# 星期表頭，週日在前
WEEKDAYS = ["日", "一", "二", "三", "四", "五", "六"]

LEAP_MONTH_PREFIX = "闰"
NEW_YEARS_EVE = "除夕"

# 黃帝紀年 = 年份 + 2697
HUANGDI_EPOCH_OFFSET = 2697
