"""
Словари для извлечения полей из сертификатов родословной.

Все списки - данные, а не логика: их можно переопределить в YAML-профиле
(parsing/profiles/<code>.yaml). Здесь - значения по умолчанию для
сертификатов Kennel Club of Thailand (KCTH).
"""

# =============================================================================
# ШУМ OCR
# =============================================================================
# Короткие токены, которые OCR систематически "читает" на декоративных
# рамках, гербах и печатях сертификата. Удаляются только как отдельные
# токены (между пробелами), внутри слов не трогаются. Регистр важен:
# заглавные "SE", "IE" встречаются в кличках.
NOISE_TOKENS = (
    "ee",
    "eee",
    "ae",
    "oe",
    "se",
    "ie",
    "|",
    "||",
    "~",
    "=",
    "_",
    "»",
    "«",
)

# Префиксы-мусор в начале строк с кличками родителей: короткий фрагмент
# с заглавной буквы + пробел. Регистр важен ("Se " - мусор, "SE " - нет).
PARENT_NAME_NOISE_PREFIXES = (
    "Ee",
    "Se",
    "Ae",
    "Oe",
    "Ce",
    "Re",
    "Sa",
)

# =============================================================================
# РЕЕСТР
# =============================================================================
# Буквенный префикс официального номера (KCTH 2024-0091)
REGISTRY_PREFIXES = ("KCTH",)

# =============================================================================
# ПОРОДА
# =============================================================================
# Ключевое слово породы -> каноническое название для формы
BREED_KEYWORDS = {
    "RIDGEBACK": "Thai Ridgeback Dog",
    "BANGKAEW": "Thai Bangkaew Dog",
}

# =============================================================================
# ПОЛ
# =============================================================================
# "Bitch" / "Dog" - термины реестров для самки / самца
FEMALE_KEYWORDS = ("Female", "Bitch")
MALE_KEYWORDS = ("Male", "Dog")

# =============================================================================
# ОКРАС
# =============================================================================
# Канонические окрасы (длинные варианты раньше коротких)
CANONICAL_COLORS = (
    "Light Fawn",
    "Fawn",
    "Isabella",
    "Blue",
    "Black",
    "Red",
    "Silver",
    "Brindle",
    "Chocolate",
    "Cream",
    "White",
)

# =============================================================================
# ВЛАДЕЛЕЦ
# =============================================================================
HONORIFICS = ("Mrs.", "Mrs", "Mr.", "Mr", "Miss", "Ms.", "Ms")

# =============================================================================
# МЕСЯЦЫ
# =============================================================================
# Название месяца (полное и сокращённое) -> номер "01".."12".
# Дата собирается строкой yyyy-mm-dd напрямую, без парсера дат,
# чтобы не получить сдвиг дня из-за часового пояса.
MONTH_NUMBERS = {
    "JANUARY": "01", "JAN": "01",
    "FEBRUARY": "02", "FEB": "02",
    "MARCH": "03", "MAR": "03",
    "APRIL": "04", "APR": "04",
    "MAY": "05",
    "JUNE": "06", "JUN": "06",
    "JULY": "07", "JUL": "07",
    "AUGUST": "08", "AUG": "08",
    "SEPTEMBER": "09", "SEPT": "09", "SEP": "09",
    "OCTOBER": "10", "OCT": "10",
    "NOVEMBER": "11", "NOV": "11",
    "DECEMBER": "12", "DEC": "12",
}

# =============================================================================
# МЕТКИ ПОЛЕЙ
# =============================================================================
# Метки, на которых обрывается значение соседнего поля.
# Включают частые OCR-искажения ("Narne" вместо "Name").
NAME_LABELS = ("Registered Name", "Name", "Narne", "Nane", "Mame")
BREED_LABELS = ("Breed",)
COLOR_LABELS = ("Colour", "Color")
SEX_LABELS = ("Sex", "Gender")
DATE_LABELS = ("Date of Birth", "Birth Date", "Date", "DOB", "D.O.B", "Born", "Whelped")
REGISTRATION_LABELS = ("Registration", "Reg")
MICROCHIP_LABELS = ("Microchip", "Chip")
SIRE_LABELS = ("Sire Name", "Sire's Name", "Sire")
DAM_LABELS = ("Dam Name", "Dam's Name", "Dam")
OWNER_LABELS = ("Owner",)
BREEDER_LABELS = ("Breeder",)

ALL_LABELS = (
    NAME_LABELS + BREED_LABELS + COLOR_LABELS + SEX_LABELS + DATE_LABELS
    + REGISTRATION_LABELS + MICROCHIP_LABELS + SIRE_LABELS + DAM_LABELS
    + OWNER_LABELS + BREEDER_LABELS
)
