# tests/test_sign.py
import time
from datetime import datetime, timedelta, timezone

import jwt
import pytest

from pkg_jwt.application.use_cases.sign import (
    SignTokenUseCase,
    build_claims,
    ensure_secret_strength,
    resolve_expiration,
)
from pkg_jwt.domain.constants import DEFAULT_EXPIRATION_SECONDS, ErrorKey
from pkg_jwt.domain.exceptions import (
    ExpirationInPastError,
    InvalidTimeExpressionError,
    SecretTooWeakError,
    SignFailureError,
)
from pkg_jwt.domain.value_objects import AbsoluteInstant, HumanExpression, RelativeSeconds

NOW = 1_700_000_000


def _decode(token, secret):
    return jwt.decode(token, secret, algorithms=["HS256"], options={"verify_aud": False})


class _FailingCodec:
    def encode(self, claims, secret, headers):
        raise RuntimeError("Mocked sign error")

    def decode(self, token, secret, issuer=None):
        raise AssertionError("not used")


class _RecordingCodec:
    def __init__(self):
        self.calls = []

    def encode(self, claims, secret, headers):
        self.calls.append((claims, secret, headers))
        return "header.payload.signature"

    def decode(self, token, secret, issuer=None):
        raise AssertionError("not used")


# --- secret gate -----------------------------------------------------------


def test_secret_of_31_chars_is_too_weak(signer):
    with pytest.raises(SecretTooWeakError) as exc_info:
        signer.execute("x" * 31, {})
    assert exc_info.value.key is ErrorKey.SECRET_TOO_WEAK


def test_secret_of_32_chars_is_accepted(signer):
    token = signer.execute("x" * 32, {})
    assert len(token.split(".")) == 3


@pytest.mark.parametrize("secret", ["", None, b"short"])
def test_missing_or_short_secret_is_too_weak(secret):
    with pytest.raises(SecretTooWeakError):
        ensure_secret_strength(secret)


def test_secret_is_checked_before_expiration():
    codec = _RecordingCodec()
    signer = SignTokenUseCase(codec=codec)
    with pytest.raises(SecretTooWeakError):
        signer.execute("short", {}, "not a time")
    assert codec.calls == []


def test_secret_bytes_are_passed_to_codec(secret):
    codec = _RecordingCodec()
    SignTokenUseCase(codec=codec).execute(secret, {})
    _, key, headers = codec.calls[0]
    assert key == secret.encode("utf-8")
    assert headers == {"alg": "HS256", "typ": "JWT"}

    SignTokenUseCase(codec=codec).execute(b"b" * 32, {})
    assert codec.calls[1][1] == b"b" * 32


# --- expiration ------------------------------------------------------------


def test_resolve_expiration_variants():
    assert resolve_expiration(RelativeSeconds(60), NOW) == NOW + 60
    assert resolve_expiration(RelativeSeconds(1.9), NOW) == NOW + 1
    assert resolve_expiration(HumanExpression("2 hours"), NOW) == NOW + 7200
    assert resolve_expiration(HumanExpression("1 day ago"), NOW) == NOW - 86400

    at = datetime.fromtimestamp(NOW + 30, tz=timezone.utc)
    assert resolve_expiration(AbsoluteInstant(at), NOW) == NOW + 30

    # naive datetimes are UTC
    naive = datetime(2030, 1, 1, 12, 0, 0)
    aware = datetime(2030, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
    assert resolve_expiration(AbsoluteInstant(naive), NOW) == int(aware.timestamp())


def test_default_expiration_is_15_minutes(codec, secret):
    signer = SignTokenUseCase(codec=codec, clock=lambda: float(NOW))
    # the frozen clock is in the past, so skip exp verification here
    payload = jwt.decode(
        signer.execute(secret, {}),
        secret,
        algorithms=["HS256"],
        options={"verify_aud": False, "verify_exp": False, "verify_iat": False, "verify_nbf": False},
    )
    assert payload["exp"] == NOW + DEFAULT_EXPIRATION_SECONDS
    assert payload["iat"] == NOW
    assert payload["nbf"] == NOW


@pytest.mark.parametrize(
    "expiration, offset",
    [
        (3600, 3600),
        ("2 hours", 7200),
        ("15 m", 900),
        ("+1 day", 86400),
        ("30 minutes from now", 1800),
        (timedelta(minutes=30), 1800),
    ],
)
def test_relative_expirations(signer, secret, expiration, offset):
    before = int(time.time())
    payload = _decode(signer.execute(secret, {}, expiration), secret)
    after = int(time.time())
    assert before + offset - 2 <= payload["exp"] <= after + offset + 2


def test_absolute_expiration(signer, secret):
    at = datetime.now(timezone.utc) + timedelta(hours=2)
    payload = _decode(signer.execute(secret, {}, at), secret)
    assert abs(payload["exp"] - int(at.timestamp())) <= 1


@pytest.mark.parametrize(
    "expiration",
    [
        0,
        -1,
        -3600,
        0.5,
        "1 hour ago",
        "-30 minutes",
        "0 seconds",
        timedelta(seconds=-5),
    ],
)
def test_expiration_in_past_or_now_is_rejected(signer, secret, expiration):
    with pytest.raises(ExpirationInPastError) as exc_info:
        signer.execute(secret, {}, expiration)
    assert exc_info.value.status_code == 400


def test_absolute_expiration_in_past_is_rejected(signer, secret):
    with pytest.raises(ExpirationInPastError):
        signer.execute(secret, {}, datetime.now(timezone.utc) - timedelta(hours=1))


def test_expiration_equal_to_now_is_rejected(codec, secret):
    signer = SignTokenUseCase(codec=codec, clock=lambda: float(NOW))
    at = datetime.fromtimestamp(NOW, tz=timezone.utc)
    with pytest.raises(ExpirationInPastError):
        signer.execute(secret, {}, at)


def test_invalid_human_expiration(signer, secret):
    with pytest.raises(InvalidTimeExpressionError):
        signer.execute(secret, {}, "1 hour 30 minutes")


# --- claims ----------------------------------------------------------------


def test_default_claims(signer, secret):
    payload = _decode(signer.execute(secret, {"userId": 111, "customField": "test"}), secret)
    assert payload["iss"] == "Core-Issuer"
    assert payload["sub"] == ""
    assert payload["aud"] == ["Core-Audience"]
    assert isinstance(payload["jti"], str)
    assert isinstance(payload["nbf"], int)
    assert isinstance(payload["iat"], int)
    assert isinstance(payload["exp"], int)
    assert payload["userId"] == 111
    assert payload["customField"] == "test"


def test_none_claims_behave_like_empty(signer, secret):
    payload = _decode(signer.execute(secret), secret)
    assert payload["iss"] == "Core-Issuer"


def test_caller_claims_override_defaults_except_exp(signer, secret):
    claims = {
        "iss": "Custom-Issuer",
        "sub": "user-123",
        "aud": ["Custom-Audience"],
        "exp": 1,
        "userId": 222,
    }
    before = int(time.time())
    payload = _decode(signer.execute(secret, claims, 3600), secret)
    assert payload["iss"] == "Custom-Issuer"
    assert payload["sub"] == "user-123"
    assert payload["aud"] == ["Custom-Audience"]
    assert payload["userId"] == 222
    assert payload["exp"] >= before + 3600 - 2


def test_caller_claims_are_not_mutated(signer, secret):
    claims = {"role": "admin"}
    signer.execute(secret, claims)
    assert claims == {"role": "admin"}


def test_build_claims_merge_order():
    payload = build_claims({"sub": "s", "exp": 5}, now=NOW, exp=NOW + 10)
    assert payload["sub"] == "s"
    assert payload["exp"] == NOW + 10
    assert payload["iat"] == NOW
    assert payload["nbf"] == NOW


def test_jti_is_unique_per_call(signer, secret):
    first = _decode(signer.execute(secret, {}), secret)
    second = _decode(signer.execute(secret, {}), secret)
    assert first["jti"] != second["jti"]


def test_token_header(signer, secret):
    token = signer.execute(secret, {})
    assert jwt.get_unverified_header(token) == {"alg": "HS256", "typ": "JWT"}


# --- codec failures --------------------------------------------------------


def test_codec_failure_is_wrapped(secret):
    signer = SignTokenUseCase(codec=_FailingCodec())
    with pytest.raises(SignFailureError) as exc_info:
        signer.execute(secret, {"userId": 123})

    err = exc_info.value
    assert err.key is ErrorKey.SIGN_ERROR
    assert err.status_code == 500
    assert isinstance(err.__cause__, RuntimeError)
    assert str(err.__cause__) == "Mocked sign error"


def test_unserializable_claim_is_a_sign_failure(signer, secret):
    with pytest.raises(SignFailureError) as exc_info:
        signer.execute(secret, {"obj": object()})
    assert isinstance(exc_info.value.__cause__, TypeError)


# --- caller input that cannot round-trip -----------------------------------


def test_non_ascii_unit_expiration_is_invalid(signer, secret):
    with pytest.raises(InvalidTimeExpressionError):
        signer.execute(secret, {}, "5 mınutes")


@pytest.mark.parametrize("expiration", [float("inf"), float("-inf"), float("nan"), True])
def test_non_finite_or_bool_expiration_is_rejected(signer, secret, expiration):
    with pytest.raises(TypeError):
        signer.execute(secret, {}, expiration)


def test_relative_seconds_rejects_non_finite():
    with pytest.raises(TypeError):
        RelativeSeconds(float("nan"))
    assert resolve_expiration(RelativeSeconds(10**12), NOW) == NOW + 10**12


@pytest.mark.parametrize("claims", [{"sub": 123}, {"sub": None}, {"jti": 42}])
def test_non_string_sub_or_jti_is_rejected(claims):
    codec = _RecordingCodec()
    with pytest.raises(TypeError):
        SignTokenUseCase(codec=codec).execute("s" * 32, claims)
    assert codec.calls == []


def test_string_sub_round_trips(signer, verifier, secret):
    token = signer.execute(secret, {"sub": "123", "jti": "fixed-id"})
    result = verifier.execute(token, secret)
    assert result.subject == "123"
    assert result.token_id == "fixed-id"
