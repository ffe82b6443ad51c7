import pytest

from powermenu.actions import ActionId, ActionRegistry, ActionSpec, build
from powermenu.errors import ConfigError

KEYS = {
    ActionId.SHUTDOWN: "s",
    ActionId.REBOOT: "r",
    ActionId.EXIT: "e",
    ActionId.LOCK: "l",
    ActionId.SUSPEND: "h",
}


def _entries(**keys):
    return {
        action: {
            "label": action.value.title(),
            "command": f"run-{action.value}",
            "key": keys.get(action.value, KEYS[action]),
        }
        for action in ActionId
    }


def test_registry_keeps_canonical_order_regardless_of_input_order():
    entries = dict(reversed(list(_entries().items())))

    registry = build(entries)

    assert [spec.action for spec in registry] == [
        ActionId.SHUTDOWN, ActionId.REBOOT, ActionId.EXIT, ActionId.LOCK, ActionId.SUSPEND,
    ]
    assert len(registry) == 5


def test_registry_requires_all_five_actions():
    entries = _entries()
    del entries[ActionId.LOCK]

    with pytest.raises(ConfigError, match="lock"):
        build(entries)


def test_lookup_by_action_id():
    registry = build(_entries())

    assert registry[ActionId.EXIT] == ActionSpec(ActionId.EXIT, "Exit", "run-exit", "e")


def test_key_lookup_ignores_case_on_both_sides():
    registry = build(_entries(shutdown="S"))

    assert registry.find_by_key("s").action is ActionId.SHUTDOWN
    assert registry.find_by_key("S").action is ActionId.SHUTDOWN


def test_actions_without_key_are_never_matched():
    registry = build(_entries(reboot=None))

    assert registry[ActionId.REBOOT].key is None
    assert registry.find_by_key("x") is None


def test_shared_key_resolves_to_first_action_in_menu_order():
    registry = build(_entries(reboot="z", suspend="z"))

    assert registry.find_by_key("z").action is ActionId.REBOOT
    assert registry.duplicate_keys() == {"z": [ActionId.REBOOT, ActionId.SUSPEND]}


def test_no_duplicates_reported_for_distinct_keys():
    assert build(_entries()).duplicate_keys() == {}


def test_registries_compare_by_content():
    assert build(_entries()) == build(_entries())
    assert build(_entries()) != build(_entries(lock="k"))
    assert isinstance(build(_entries()), ActionRegistry)
