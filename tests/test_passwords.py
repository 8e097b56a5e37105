"""Tests for PasswordPolicy."""

import pytest

from orbit.config.models import PasswordPolicyConfig
from orbit.errors import WeakPasswordError
from orbit.security import PasswordPolicy


class TestPasswordPolicy:
    def test_strong_password_passes(self):
        policy = PasswordPolicy()
        assert policy.violations("Secret@123") == []
        policy.validate("Secret@123")

    @pytest.mark.parametrize(
        ("password", "problem"),
        [
            ("Se@1", "be at least 8 characters long"),
            ("secret@123", "contain an uppercase letter"),
            ("SECRET@123", "contain a lowercase letter"),
            ("Secret@abc", "contain a number"),
            ("Secret1234", "contain a special character (@$!%*?&)"),
        ],
    )
    def test_each_rule(self, password, problem):
        assert PasswordPolicy().violations(password) == [problem]

    def test_other_punctuation_is_not_special(self):
        assert PasswordPolicy().violations("Secret@12") == []
        assert PasswordPolicy().violations("Secret#12") == [
            "contain a special character (@$!%*?&)"
        ]

    def test_validate_raises_with_all_violations(self):
        with pytest.raises(WeakPasswordError) as exc_info:
            PasswordPolicy().validate("abc")
        assert len(exc_info.value.violations) == 4
        assert str(exc_info.value).startswith("Password must be at least 8")

    def test_not_enforced(self):
        policy = PasswordPolicy(enforce=False)
        policy.validate("abc")
        assert policy.violations("abc")

    def test_from_config(self):
        config = PasswordPolicyConfig(min_length=4, require_special=False)
        policy = PasswordPolicy.from_config(config)
        assert policy.violations("Ab12") == []
