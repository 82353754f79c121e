import json

from reflexkit.biome import default_configuration


def test_schema_and_ignore():
    conf = default_configuration("out")
    assert conf["$schema"] == "./node_modules/@biomejs/biome/configuration_schema.json"
    assert conf["files"]["ignore"] == ["node_modules", "out"]


def test_output_dir_is_used():
    conf = default_configuration("build")
    assert conf["files"]["ignore"][-1] == "build"


def test_formatter_settings():
    formatter = default_configuration("out")["formatter"]
    assert formatter["indentStyle"] == "tab"
    assert formatter["lineWidth"] == 120
    assert formatter["lineEnding"] == "lf"


def test_omitted_sections():
    conf = default_configuration("out")
    for key in ("assists", "extends", "overrides"):
        assert key not in conf


def test_javascript_formatter_has_no_enabled_flag():
    js = default_configuration("out")["javascript"]
    assert "enabled" not in js["formatter"]
    assert js["jsxRuntime"] == "transparent"
    assert js["parser"] == {"unsafeParameterDecoratorsEnabled": False}


def test_rules_sorted():
    rules = default_configuration("out")["linter"]["rules"]
    assert list(rules) == sorted(rules)
    for value in rules.values():
        if isinstance(value, dict):
            assert list(value) == sorted(value)


def test_rule_overrides():
    rules = default_configuration("out")["linter"]["rules"]
    assert rules["recommended"] is True
    assert rules["style"]["noDefaultExport"] == "off"
    assert rules["suspicious"]["noReactSpecificProps"] == "off"
    assert rules["nursery"]["useSortedClasses"] == "error"


def test_json_round_trip():
    conf = default_configuration("out")
    assert json.loads(json.dumps(conf, indent="\t")) == conf


def test_fresh_copy_each_call():
    first = default_configuration("out")
    first["files"]["ignore"].append("more")
    first["linter"]["rules"]["a11y"]["all"] = False
    second = default_configuration("out")
    assert second["files"]["ignore"] == ["node_modules", "out"]
    assert second["linter"]["rules"]["a11y"]["all"] is True