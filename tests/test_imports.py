def test_import_dmgcalc_package() -> None:
    import importlib

    module = importlib.import_module("dmgcalc")
    assert module is not None


def test_import_rng_no_side_effects() -> None:
    from dmgcalc.core.rng import RNG

    rng = RNG(42)
    value = rng.randint(0, 1)
    assert value in (0, 1)


def test_import_services_and_config_together() -> None:
    from dmgcalc.config import CalcSettings
    from dmgcalc.services import BattleService, DamageResolver

    assert CalcSettings().can_kill_yourself is False
    assert BattleService is not None
    assert DamageResolver is not None
