PERSIAN_EPOCH_JDN = 1948320  # day before 1 Farvardin 1 in the 2820-year arithmetic
UNIX_EPOCH_JDN = 2440588  # 1970-01-01
GREGORIAN_REFORM_JDN = 2299160  # 1582-10-04 in the Julian calendar, last pre-reform day

SECONDS_PER_DAY = 24 * 60 * 60
NANOSECONDS_PER_SECOND = 1_000_000_000

DAYS_IN_2820_YEARS = 1029983

DEFAULT_FORMAT = 'yyyy-MM-ddTHH:mm:ss.ns'

# Persian month names, Farvardin first
PERSIAN_MONTHS = (
    'فروردین',
    'اردیبهشت',
    'خرداد',
    'تیر',
    'مرداد',
    'شهریور',
    'مهر',
    'آبان',
    'آذر',
    'دی',
    'بهمن',
    'اسفند',
)

# Persian weekday names, Shanbeh (Saturday) first
PERSIAN_WEEKDAYS = (
    'شنبه',
    'یک‌شنبه',
    'دوشنبه',
    'سه‌شنبه',
    'چهارشنبه',
    'پنج‌شنبه',
    'جمعه',
)

PERSIAN_SHORT_WEEKDAYS = ('ش', 'ی', 'د', 'س', 'چ', 'پ', 'ج')

# 12-hour markers keyed by hour < 12
PERSIAN_AM_PM = {True: 'قبل از ظهر', False: 'بعد از ظهر'}
PERSIAN_SHORT_AM_PM = {True: 'ق.ظ', False: 'ب.ظ'}

# Gregorian weekday (Sun=0 .. Sat=6) -> Persian weekday (Sat=0 .. Fri=6)
GREGORIAN_TO_PERSIAN_WEEKDAY = (1, 2, 3, 4, 5, 6, 0)

# Persian weekday (Sat=0 .. Fri=6) -> Gregorian weekday (Sun=0 .. Sat=6)
PERSIAN_TO_GREGORIAN_WEEKDAY = (6, 0, 1, 2, 3, 4, 5)

# days before each Persian month
PERSIAN_MONTH_OFFSETS = (
    0,    # Farvardin
    31,   # Ordibehesht
    62,   # Khordad
    93,   # Tir
    124,  # Mordad
    155,  # Shahrivar
    186,  # Mehr
    216,  # Aban
    246,  # Azar
    276,  # Dey
    306,  # Bahman
    336,  # Esfand
)

# days before each Gregorian month, indexed by [is_leap][month]
GREGORIAN_MONTH_OFFSETS = (
    (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334),
    (0, 31, 60, 91, 121, 152, 182, 213, 244, 274, 305, 335),
)

# month lengths indexed by [month][is_leap]
PERSIAN_MONTH_DAYS = (
    (31, 31),
    (31, 31),
    (31, 31),
    (31, 31),
    (31, 31),
    (31, 31),
    (30, 30),
    (30, 30),
    (30, 30),
    (30, 30),
    (30, 30),
    (29, 30),
)

GREGORIAN_MONTH_DAYS = (
    (31, 31),
    (28, 29),
    (31, 31),
    (30, 30),
    (31, 31),
    (30, 30),
    (31, 31),
    (31, 31),
    (30, 30),
    (31, 31),
    (30, 30),
    (31, 31),
)

_DIGITS = '0123456789'
_PERSIAN_DIGITS = '۰۱۲۳۴۵۶۷۸۹'
PERSIAN_DIGITS_TABLE = str.maketrans(_DIGITS, _PERSIAN_DIGITS)
