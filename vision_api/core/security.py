import secrets

from fastapi.security import HTTPBasic, HTTPBasicCredentials

REALM = "Administrative Area"

basic = HTTPBasic(realm=REALM, auto_error=False)


def credentials_match(credentials: HTTPBasicCredentials, username: str, password: str) -> bool:
    user_ok = secrets.compare_digest(credentials.username.encode('utf-8'), username.encode('utf-8'))
    password_ok = secrets.compare_digest(credentials.password.encode('utf-8'), password.encode('utf-8'))
    return user_ok and password_ok
