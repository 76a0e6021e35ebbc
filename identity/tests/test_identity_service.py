from django.test import SimpleTestCase, override_settings
from django.core.exceptions import ImproperlyConfigured

from identity.conf import century_pivot, identity_service
from identity.services.identity_service import IdentityValidationService, MSG_UNSUPPORTED
from identity.services.id_number import IdNumberValidator
from identity.services.types import (
    IdentityType, ValidationResult, BaseIdentityValidator, UNSUPPORTED_TYPE, INVALID_DATE,
)

class _AlwaysValid(BaseIdentityValidator):
    def validate(self, raw):
        return ValidationResult.ok(raw.upper())

class IdentityValidationServiceTest(SimpleTestCase):
    def setUp(self):
        self.svc = IdentityValidationService()

    def test_dispatch_by_enum(self):
        self.assertTrue(self.svc.validate_identity(IdentityType.NATIONAL_ID, "8001015009087").valid)
        self.assertTrue(self.svc.validate_identity(IdentityType.PASSPORT, "ab123456").valid)

    def test_dispatch_by_wire_value(self):
        self.assertTrue(self.svc.validate_identity("sa_id", "8001015009087").valid)
        # 12 chiffres: acceptable comme passeport, pas comme SA ID
        self.assertTrue(self.svc.validate_identity("passport", "800101500908").valid)
        self.assertFalse(self.svc.validate_identity("passport", "8001015009087").valid)
        self.assertFalse(self.svc.validate_identity("sa_id", "ab123456").valid)

    def test_unsupported_type(self):
        for id_type in ["drivers_license", "", None, 3, "SA_ID"]:
            res = self.svc.validate_identity(id_type, "8001015009087")
            self.assertFalse(res.valid)
            self.assertEqual(res.error_code, UNSUPPORTED_TYPE)
            self.assertEqual(res.error_message, MSG_UNSUPPORTED)

    def test_non_string_value(self):
        with self.assertRaises(TypeError):
            self.svc.validate_identity(IdentityType.NATIONAL_ID, None)

    def test_injected_validators(self):
        svc = IdentityValidationService(passport_validator=_AlwaysValid())
        self.assertEqual(svc.validate_identity("passport", "x").normalized_value, "X")

    def test_with_pivot(self):
        svc = IdentityValidationService.with_pivot(0)
        self.assertEqual(svc.validate_identity("sa_id", "0002295009084").error_code, INVALID_DATE)

class ValidationResultTest(SimpleTestCase):
    def test_invariants(self):
        with self.assertRaises(ValueError):
            ValidationResult(valid=True, error_message="nope")
        with self.assertRaises(ValueError):
            ValidationResult(valid=False)
        with self.assertRaises(ValueError):
            ValidationResult(valid=False, error_message="")

    def test_as_dict(self):
        self.assertEqual(ValidationResult.ok("abc").as_dict(),
                         {"valid": True, "error_code": None, "error_message": None, "normalized_value": "abc"})

class IdentityConfTest(SimpleTestCase):
    @override_settings(IDENTITY_CENTURY_PIVOT=30)
    def test_pivot_from_settings(self):
        self.assertEqual(century_pivot(), 30)
        svc = identity_service()
        self.assertIsInstance(svc.validators[IdentityType.NATIONAL_ID], IdNumberValidator)
        self.assertEqual(svc.validators[IdentityType.NATIONAL_ID].century_pivot, 30)

    @override_settings(IDENTITY_CENTURY_PIVOT=120)
    def test_pivot_out_of_range(self):
        with self.assertRaises(ImproperlyConfigured):
            century_pivot()

    @override_settings(IDENTITY_CENTURY_PIVOT="30")
    def test_pivot_from_env_string(self):
        self.assertEqual(century_pivot(), 30)

    def test_unparsable_pivot(self):
        for bad in ("abc", "", "3.5", "-1", None, True):
            with self.subTest(bad=bad), override_settings(IDENTITY_CENTURY_PIVOT=bad):
                with self.assertRaises(ImproperlyConfigured):
                    century_pivot()
                with self.assertRaises(ImproperlyConfigured):
                    identity_service()
