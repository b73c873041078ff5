# phonebook_core/validators.py
import re

# one or more "+" then ASCII digits; "++123" is accepted on purpose
PHONE_PATTERN = re.compile(r"[+]+[0-9]+")

# local@domain.tld, tld 2-4 alphanumeric chars
EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9]+@[a-zA-Z0-9]+[.][a-zA-Z0-9]{2,4}")


def is_valid_phone(value) -> bool:
    if not isinstance(value, str):
        return False
    return PHONE_PATTERN.fullmatch(value) is not None


def is_valid_email(value) -> bool:
    if not isinstance(value, str):
        return False
    return EMAIL_PATTERN.fullmatch(value) is not None
