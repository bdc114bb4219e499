from copy import deepcopy

import pytest

from scimfilter.config import EvaluatorConfig, set_evaluator_config

USER_DATA = {
    "schemas": [
        "urn:ietf:params:scim:schemas:core:2.0:User",
        "urn:ietf:params:scim:schemas:extension:enterprise:2.0:User",
    ],
    "id": "2819c223-7f76-453a-919d-413861904646",
    "externalId": "bjensen",
    "userName": "bjensen@example.com",
    "name": {
        "formatted": "Ms. Barbara J Jensen III",
        "familyName": "Jensen",
        "givenName": "Barbara",
        "middleName": "Jane",
    },
    "displayName": "Babs Jensen",
    "nickName": "Babs",
    "nicknames": ["Bob", "Bobby"],
    "title": "Tour Guide",
    "active": True,
    "loginCount": 42,
    "rating": 4.5,
    "emails": [
        {"value": "bjensen@example.com", "type": "work", "primary": True},
        {"value": "babs@jensen.org", "type": "home"},
    ],
    "phoneNumbers": [],
    "ims": None,
    "x509Certificates": [{"value": b"\x30\x82\x03\x1e"}],
    "meta": {
        "resourceType": "User",
        "created": "2010-01-23T04:56:22Z",
        "lastModified": "2011-05-13T04:42:34Z",
        "version": 'W/"3694e05e9dff591"',
    },
    "urn:ietf:params:scim:schemas:extension:enterprise:2.0:User": {
        "employeeNumber": "701984",
        "costCenter": "4130",
        "organization": "Universal Studios",
        "manager": {
            "value": "26118915-6090-4610-87e4-49d8ca9f808d",
            "displayName": "John Smith",
        },
    },
}


GROUP_DATA = {
    "schemas": ["urn:ietf:params:scim:schemas:core:2.0:Group"],
    "id": "e9e30dba-f08f-4109-8486-d5c6a331660a",
    "displayName": "Tour Guides",
    "members": [
        {
            "value": "2819c223-7f76-453a-919d-413861904646",
            "display": "Babs Jensen",
            "type": "User",
        },
        {
            "value": "902c246b-6245-4190-8e05-00816be7344a",
            "display": "Mandy Pepperidge",
            "type": "User",
        },
    ],
}


@pytest.fixture
def user_data():
    return deepcopy(USER_DATA)


@pytest.fixture
def group_data():
    return deepcopy(GROUP_DATA)


@pytest.fixture(autouse=True)
def default_evaluator_config():
    set_evaluator_config(EvaluatorConfig.create())
    yield
    set_evaluator_config(EvaluatorConfig.create())
