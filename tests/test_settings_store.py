"""
Test key-value persistence of projection inputs.
"""

import json

from sqlalchemy import select
from sqlalchemy.orm import Session

from retirement_projection import database
from retirement_projection.database import SettingRow
from retirement_projection.encrypted_database import EncryptionManager
from retirement_projection.models import Inputs
from retirement_projection.settings_store import SettingsStore


def _put_raw(engine, key, value):
    with Session(engine) as s:
        s.add(SettingRow(key=key, value=value))
        s.commit()


class TestSettingsStore:
    """Per-field storage with default fallback."""

    def test_empty_store_loads_defaults(self, settings_store):
        assert settings_store.load() == Inputs()

    def test_save_then_load(self, settings_store, make_inputs, college_inputs):
        inputs = make_inputs(college_inputs)
        settings_store.save(inputs)
        assert settings_store.load() == inputs

    def test_one_row_per_field(self, settings_store, db_engine, make_inputs, household_inputs):
        settings_store.save(make_inputs(household_inputs))
        with Session(db_engine) as s:
            keys = {r.key for r in s.scalars(select(SettingRow)).all()}
        assert keys == set(household_inputs)

    def test_save_overwrites(self, settings_store, make_inputs, household_inputs):
        settings_store.save(make_inputs(household_inputs))
        updated = make_inputs(household_inputs, retirementAge=55)
        settings_store.save(updated)
        assert settings_store.load().retirement_age == 55

    def test_values_encrypted_at_rest(self, settings_store, db_engine, make_inputs, household_inputs):
        settings_store.save(make_inputs(household_inputs))
        with Session(db_engine) as s:
            row = s.scalars(select(SettingRow).filter_by(key="portfolioValue")).one()
        assert "250000" not in row.value

    def test_plaintext_when_disabled(self, db_engine, encryption, make_inputs, household_inputs):
        plain = EncryptionManager(key=encryption.key, enabled=False)
        SettingsStore(engine=db_engine, encryption=plain).save(make_inputs(household_inputs))
        with Session(db_engine) as s:
            row = s.scalars(select(SettingRow).filter_by(key="maxAge")).one()
        assert json.loads(row.value) == 90

    def test_partial_settings_fill_defaults(self, db_engine):
        plain = EncryptionManager(enabled=False)
        _put_raw(db_engine, "maxAge", "95")
        inputs = SettingsStore(engine=db_engine, encryption=plain).load()
        assert inputs.max_age == 95
        assert inputs.initial_age == Inputs().initial_age

    def test_unreadable_value_falls_back(self, db_engine):
        plain = EncryptionManager(enabled=False)
        _put_raw(db_engine, "maxAge", "not json")
        _put_raw(db_engine, "retirementAge", "62")
        inputs = SettingsStore(engine=db_engine, encryption=plain).load()
        assert inputs.max_age == Inputs().max_age
        assert inputs.retirement_age == 62

    def test_invalid_value_falls_back(self, db_engine):
        plain = EncryptionManager(enabled=False)
        _put_raw(db_engine, "numKids", "-3")
        _put_raw(db_engine, "collegeCost", "75000")
        inputs = SettingsStore(engine=db_engine, encryption=plain).load()
        assert inputs.num_kids == Inputs().num_kids
        assert inputs.college_cost == 75000

    def test_unknown_keys_ignored(self, db_engine):
        plain = EncryptionManager(enabled=False)
        _put_raw(db_engine, "darkMode", "true")
        assert SettingsStore(engine=db_engine, encryption=plain).load() == Inputs()

    def test_clear(self, settings_store, make_inputs, household_inputs):
        settings_store.save(make_inputs(household_inputs))
        assert settings_store.clear() == len(household_inputs)
        assert settings_store.load() == Inputs()

    def test_default_engine_is_application_engine(self, monkeypatch, db_engine, encryption, make_inputs, household_inputs):
        monkeypatch.setattr(database, "_engine", db_engine)
        store = SettingsStore(encryption=encryption)
        assert store.engine is db_engine
        inputs = make_inputs(household_inputs)
        store.save(inputs)
        assert store.load() == inputs
