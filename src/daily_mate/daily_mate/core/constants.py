"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_SESSION_DAYS = 7
DEFAULT_WORKPLACE_COLOR = "#3B82F6"
MIN_PASSWORD_LENGTH = 6

# A month view always renders 6 rows of 7 days.
CALENDAR_GRID_CELLS = 42

MONTH_NAMES = (
    "Ocak",
    "Şubat",
    "Mart",
    "Nisan",
    "Mayıs",
    "Haziran",
    "Temmuz",
    "Ağustos",
    "Eylül",
    "Ekim",
    "Kasım",
    "Aralık",
)

# Indexed by day number: 1=Sunday ... 7=Saturday.
DAY_NAMES = (
    "",
    "Pazar",
    "Pazartesi",
    "Salı",
    "Çarşamba",
    "Perşembe",
    "Cuma",
    "Cumartesi",
)
