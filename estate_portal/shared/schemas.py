from typing import Annotated
from pydantic import AfterValidator, EmailStr, StringConstraints

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

# Emails are compared case-insensitively everywhere, so store them lower-cased
NormalizedEmail = Annotated[EmailStr, AfterValidator(lambda v: v.strip().lower())]
