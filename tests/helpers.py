"""Request payloads shared by the test modules."""

PARENT_UID = "123e4567-e89b-12d3-a456-426614174000"


def valid_employee(**overrides):
    data = {
        "firstName": "John",
        "lastName": "Doe",
        "userRole": "mechanic",
        "email": "john.doe@example.com",
        "phoneNumber": "+1234567890",
        "parentUserUid": PARENT_UID,
    }
    data.update(overrides)
    return data
