import unittest

from sast_checkstyle.domain.rule import RuleRecord, normalize_rule, to_checkstyle_severity


class TestSeverityMapping(unittest.TestCase):
    def test_sonar_priorities_map_to_checkstyle(self) -> None:
        self.assertEqual("error", to_checkstyle_severity("BLOCKER"))
        self.assertEqual("error", to_checkstyle_severity("CRITICAL"))
        self.assertEqual("warning", to_checkstyle_severity("MAJOR"))
        self.assertEqual("info", to_checkstyle_severity("MINOR"))
        self.assertEqual("info", to_checkstyle_severity("info"))

    def test_checkstyle_severities_pass_through_lowercased(self) -> None:
        self.assertEqual("warning", to_checkstyle_severity("Warning"))
        self.assertEqual("ignore", to_checkstyle_severity("ignore"))

    def test_blank_and_unknown_become_none(self) -> None:
        self.assertIsNone(to_checkstyle_severity(None))
        self.assertIsNone(to_checkstyle_severity("   "))
        self.assertIsNone(to_checkstyle_severity("URGENT"))


class TestRuleRecordAdapters(unittest.TestCase):
    def test_profile_rule_shape(self) -> None:
        rec = RuleRecord.from_profile_rule(
            {
                "key": "checkstyle:EqualsAvoidNull",
                "configKey": "Checker/TreeWalker/EqualsAvoidNull",
                "severity": "MAJOR",
                "params": {"ignoreEqualsIgnoreCase": False, "max": 3},
            }
        )
        self.assertEqual("Checker/TreeWalker/EqualsAvoidNull", rec.module_path)
        self.assertEqual("EqualsAvoidNull", rec.module_name)
        self.assertEqual("checkstyle:EqualsAvoidNull", rec.rule_key)
        self.assertEqual("warning", rec.severity)
        self.assertIsNone(rec.template_key)
        self.assertFalse(rec.is_template_instance)
        self.assertEqual({"ignoreEqualsIgnoreCase": "false", "max": "3"}, rec.parameters)

    def test_scanner_rule_shape_with_param_list(self) -> None:
        rec = RuleRecord.from_scanner_rule(
            {
                "ruleKey": "checkstyle:regexp_1",
                "internalKey": "Checker/RegexpSingleline",
                "templateRuleKey": "checkstyle:regexp",
                "severity": "CRITICAL",
                "params": [
                    {"key": "format", "value": "TODO"},
                    {"key": "message"},
                    {"value": "orphan"},
                    "garbage",
                ],
            }
        )
        self.assertEqual("RegexpSingleline", rec.module_name)
        self.assertEqual("checkstyle:regexp", rec.template_key)
        self.assertTrue(rec.is_template_instance)
        self.assertEqual("error", rec.severity)
        self.assertEqual(["format", "message"], list(rec.parameters))
        self.assertEqual("TODO", rec.parameters["format"])
        self.assertIsNone(rec.parameters["message"])

    def test_parameter_order_follows_input(self) -> None:
        rec = RuleRecord.from_scanner_rule(
            {"internalKey": "Checker/X", "params": {"z": "1", "a": "2", "m": "3"}}
        )
        self.assertEqual(["z", "a", "m"], list(rec.parameters))

    def test_adapters_never_raise_on_missing_fields(self) -> None:
        for rec in (RuleRecord.from_profile_rule({}), RuleRecord.from_scanner_rule({})):
            self.assertEqual("", rec.module_path)
            self.assertEqual("", rec.rule_key)
            self.assertIsNone(rec.severity)
            self.assertIsNone(rec.template_key)
            self.assertEqual({}, rec.parameters)

        rec = RuleRecord.from_scanner_rule(None)  # type: ignore[arg-type]
        self.assertEqual("", rec.module_path)

    def test_empty_template_key_is_absent(self) -> None:
        rec = RuleRecord.from_scanner_rule({"internalKey": "Checker/X", "templateRuleKey": ""})
        self.assertIsNone(rec.template_key)
        self.assertFalse(rec.is_template_instance)

    def test_module_name_without_slash_is_whole_path(self) -> None:
        rec = RuleRecord(module_path="Header", rule_key="k")
        self.assertEqual("Header", rec.module_name)


class TestNormalizeRule(unittest.TestCase):
    def test_dispatches_on_shape(self) -> None:
        profile_rec = normalize_rule({"configKey": "Checker/A", "key": "k1"})
        scanner_rec = normalize_rule({"internalKey": "Checker/B", "ruleKey": "k2"})
        self.assertEqual(("Checker/A", "k1"), (profile_rec.module_path, profile_rec.rule_key))
        self.assertEqual(("Checker/B", "k2"), (scanner_rec.module_path, scanner_rec.rule_key))

    def test_rule_record_passes_through(self) -> None:
        rec = RuleRecord(module_path="Checker/A", rule_key="k")
        self.assertIs(rec, normalize_rule(rec))


if __name__ == "__main__":
    unittest.main()
