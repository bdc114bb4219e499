import pytest

from scimfilter.identifiers import AttrName, AttrRep, AttrRepFactory, BoundedAttrRep, SchemaUri


@pytest.mark.parametrize("value", ("userName", "$ref", "x509Certificates", "first-name"))
def test_attr_name_is_created_for_valid_value(value):
    assert AttrName(value) == value


@pytest.mark.parametrize("value", ("", "1name", "user name", "name.formatted"))
def test_attr_name_fails_for_bad_value(value):
    with pytest.raises(ValueError, match="is not valid attr name"):
        AttrName(value)


def test_attr_name_is_case_insensitive():
    assert AttrName("userName") == "USERNAME"
    assert hash(AttrName("userName")) == hash(AttrName("username"))


def test_schema_uri_is_case_insensitive():
    assert SchemaUri("urn:ietf:params:scim:schemas:core:2.0:User") == (
        "URN:IETF:PARAMS:SCIM:SCHEMAS:CORE:2.0:USER"
    )


def test_sub_attr_is_not_available_for_top_level_attr_rep():
    with pytest.raises(AttributeError, match="has no sub-attribute"):
        _ = AttrRep(attr="userName").sub_attr


def test_attr_reps_are_compared_case_insensitively():
    assert AttrRep(attr="name", sub_attr="givenName") == AttrRep(attr="NAME", sub_attr="givenname")
    assert AttrRep(attr="name") != AttrRep(attr="name", sub_attr="givenName")


def test_bounded_attr_rep_is_equal_to_attr_rep_with_the_same_attr():
    bounded = BoundedAttrRep(schema="urn:ietf:params:scim:schemas:core:2.0:User", attr="userName")

    assert bounded == AttrRep(attr="userName")
    assert bounded != BoundedAttrRep(schema="urn:other:schema", attr="userName")


@pytest.mark.parametrize(
    ("schema", "expected"),
    (
        ("urn:ietf:params:scim:schemas:core:2.0:User", False),
        ("urn:ietf:params:scim:schemas:core:2.0:user", False),
        ("urn:ietf:params:scim:schemas:extension:enterprise:2.0:User", True),
        ("urn:not:registered:schema", True),
    ),
)
def test_bounded_attr_rep_extension_flag(schema, expected):
    assert BoundedAttrRep(schema=schema, attr="attr").extension is expected


@pytest.mark.parametrize(
    ("value", "expected"),
    (
        ("userName", AttrRep(attr="userName")),
        ("name.givenName", AttrRep(attr="name", sub_attr="givenName")),
        ("members.$ref", AttrRep(attr="members", sub_attr="$ref")),
        (
            "urn:ietf:params:scim:schemas:extension:enterprise:2.0:User:manager.value",
            BoundedAttrRep(
                schema="urn:ietf:params:scim:schemas:extension:enterprise:2.0:User",
                attr="manager",
                sub_attr="value",
            ),
        ),
    ),
)
def test_attr_rep_is_deserialized(value, expected):
    actual = AttrRepFactory.deserialize(value)

    assert actual == expected
    assert type(actual) is type(expected)
    assert str(actual) == value


@pytest.mark.parametrize("value", ("", "name..givenName", "name.given.name", "emails[type]"))
def test_attr_rep_deserialization_fails_for_bad_value(value):
    with pytest.raises(ValueError, match="is not valid attribute representation"):
        AttrRepFactory.deserialize(value)
