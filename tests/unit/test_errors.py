from core.errors import (
    USER_MESSAGES,
    AuthenticationError,
    DirectoryError,
    ErrorCode,
    MalformedRecordError,
    MappingError,
    PersistenceError,
    ValidationError,
    VoyagoError,
)


def test_all_error_codes_have_user_message():
    for code in ErrorCode:
        assert code in USER_MESSAGES


def test_user_message_lookup():
    err = VoyagoError("insert into trips failed: connection reset", code=ErrorCode.TRIP_SAVE_FAILED)
    assert err.user_message == "Error saving trip. Please try again."


def test_default_code_is_internal_error():
    err = VoyagoError("boom")
    assert err.code is ErrorCode.INTERNAL_ERROR
    assert err.user_message == "Something went wrong!"


def test_subclasses_inherit_user_message():
    assert AuthenticationError("bad token", code=ErrorCode.AUTH_FAILED).user_message == USER_MESSAGES[ErrorCode.AUTH_FAILED]
    assert PersistenceError("down", code=ErrorCode.PERSISTENCE_FAILED).user_message == USER_MESSAGES[ErrorCode.PERSISTENCE_FAILED]
    assert MappingError("fail", code=ErrorCode.PLACES_FAILED).user_message == USER_MESSAGES[ErrorCode.PLACES_FAILED]
    assert DirectoryError("fail", code=ErrorCode.DIRECTORY_FAILED).user_message == USER_MESSAGES[ErrorCode.DIRECTORY_FAILED]
    assert ValidationError("bad", code=ErrorCode.VALIDATION_ERROR).user_message == USER_MESSAGES[ErrorCode.VALIDATION_ERROR]


def test_malformed_record_is_a_persistence_error():
    err = MalformedRecordError("trips row missing ownerid")
    assert isinstance(err, PersistenceError)
    assert err.code is ErrorCode.MALFORMED_RECORD


def test_user_message_never_exposes_internal_message():
    internal = "SELECT * FROM trips WHERE ownerid = 'user_secret'"
    err = VoyagoError(internal, code=ErrorCode.PERSISTENCE_FAILED)
    assert internal not in err.user_message
