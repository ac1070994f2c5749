"""Unit tests for the level catalog, schemas and config."""

import json

import pytest
from pydantic import ValidationError

from feud.catalog import LevelCatalog, LevelNotFoundError, default_catalog, load_catalog
from feud.config import clear_config_cache, get_config, get_starting_lives
from feud.models import Level
from feud.schemas import CatalogFile, GameConfig
from feud.utils import load_json, load_json_safe, validate_json_file


def write_json(path, data):
    with open(path, 'w') as f:
        json.dump(data, f, indent=2)
    return path


@pytest.fixture
def catalog_data():
    return {
        'levels': [
            {
                'id': 'pets',
                'question': 'Name a household pet.',
                'answers': [
                    {'text': 'Dog', 'points': 60},
                    {'text': 'Cat', 'points': 40},
                ],
            },
            {
                'id': 'colors',
                'question': 'Name a color.',
                'answers': [{'text': 'Blue', 'points': 100}],
            },
        ]
    }


class TestDefaultCatalog:
    """Tests for the built-in levels."""

    def test_three_levels_in_order(self):
        catalog = default_catalog()
        assert catalog.ids == ['food', 'healthy', 'vacation']

    def test_food_level(self):
        food = default_catalog().get('food')
        assert [a.text for a in food.answers][:3] == ['Pizza', 'Burger', 'Sushi']
        assert sum(a.points for a in food.answers) == 100
        assert not any(a.revealed for a in food.answers)


class TestLevelCatalog:
    """Tests for lookup and ordering."""

    def test_get_unknown_raises(self):
        with pytest.raises(LevelNotFoundError) as exc_info:
            default_catalog().get('missing')
        assert exc_info.value.level_id == 'missing'
        assert isinstance(exc_info.value, KeyError)

    def test_contains(self):
        catalog = default_catalog()
        assert 'food' in catalog
        assert 'missing' not in catalog

    def test_next_id_wraps(self):
        catalog = default_catalog()
        assert catalog.next_id('food') == 'healthy'
        assert catalog.next_id('vacation') == 'food'

    def test_empty_catalog_rejected(self):
        with pytest.raises(ValueError, match='at least one level'):
            LevelCatalog([])

    def test_duplicate_ids_rejected(self):
        with pytest.raises(ValueError, match='unique'):
            LevelCatalog([Level('a', 'Q1'), Level('a', 'Q2')])

    def test_level_without_answers_allowed(self):
        catalog = LevelCatalog.from_data({'levels': [{'id': 'x', 'question': 'Q?', 'answers': []}]})
        assert catalog.get('x').answers == ()


class TestCatalogSchema:
    """Tests for levels.json validation."""

    def test_valid(self, catalog_data):
        parsed = CatalogFile.model_validate(catalog_data)
        assert [level.id for level in parsed.levels] == ['pets', 'colors']

    def test_points_must_be_positive(self, catalog_data):
        catalog_data['levels'][0]['answers'][0]['points'] = 0
        with pytest.raises(ValidationError):
            CatalogFile.model_validate(catalog_data)

    def test_blank_answer_text(self, catalog_data):
        catalog_data['levels'][0]['answers'][0]['text'] = '   '
        with pytest.raises(ValidationError, match='blank'):
            CatalogFile.model_validate(catalog_data)

    def test_case_insensitive_duplicate_answers(self, catalog_data):
        catalog_data['levels'][0]['answers'].append({'text': 'DOG', 'points': 1})
        with pytest.raises(ValidationError, match='Duplicate answer'):
            CatalogFile.model_validate(catalog_data)

    def test_duplicate_level_ids(self, catalog_data):
        catalog_data['levels'][1]['id'] = 'pets'
        with pytest.raises(ValidationError, match='Duplicate level ids: pets'):
            CatalogFile.model_validate(catalog_data)

    def test_empty_level_list_rejected(self):
        """An empty catalog fails validation, matching LevelCatalog's rule."""
        with pytest.raises(ValidationError):
            CatalogFile.model_validate({'levels': []})

    def test_empty_level_file_not_valid(self, tmp_path):
        path = write_json(tmp_path / 'levels.json', {'levels': []})
        is_valid, error = validate_json_file(path, CatalogFile)
        assert not is_valid
        assert 'Schema validation failed' in error

    def test_extra_fields_forbidden(self, catalog_data):
        catalog_data['levels'][0]['difficulty'] = 'hard'
        with pytest.raises(ValidationError):
            CatalogFile.model_validate(catalog_data)


class TestLoadCatalog:
    """Tests for loading catalogs from disk."""

    def test_none_loads_defaults(self):
        assert load_catalog().ids == ['food', 'healthy', 'vacation']

    def test_load_from_file(self, tmp_path, catalog_data):
        path = write_json(tmp_path / 'levels.json', catalog_data)
        catalog = load_catalog(path)
        assert catalog.ids == ['pets', 'colors']
        assert catalog.get('pets').answers[0].points == 60

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_catalog(tmp_path / 'nope.json')

    def test_malformed_json(self, tmp_path):
        path = tmp_path / 'levels.json'
        path.write_text('{"levels": [')
        with pytest.raises(json.JSONDecodeError):
            load_catalog(path)

    def test_schema_failure_is_value_error(self, tmp_path):
        path = write_json(tmp_path / 'levels.json', {'levels': [{'id': 'x'}]})
        with pytest.raises(ValueError, match='Schema validation failed'):
            load_catalog(path)

    def test_shipped_sample_catalog(self):
        from pathlib import Path

        path = Path(__file__).parent.parent / 'data' / 'levels.json'
        assert load_catalog(path).ids == ['breakfast', 'pets', 'morning']


class TestJsonUtils:
    """Tests for load_json helpers."""

    def test_load_without_schema(self, tmp_path):
        path = write_json(tmp_path / 'data.json', {'a': 1})
        assert load_json(path) == {'a': 1}

    def test_load_safe_default(self, tmp_path):
        assert load_json_safe(tmp_path / 'nope.json', default={}) == {}

    def test_load_safe_invalid_schema(self, tmp_path):
        path = write_json(tmp_path / 'config.json', {'mode': 'coop'})
        assert load_json_safe(path, default='fallback', schema=GameConfig) == 'fallback'

    def test_validate_json_file(self, tmp_path, catalog_data):
        good = write_json(tmp_path / 'good.json', catalog_data)
        assert validate_json_file(good, CatalogFile) == (True, None)

        is_valid, error = validate_json_file(tmp_path / 'missing.json', CatalogFile)
        assert not is_valid
        assert 'File not found' in error

        bad = tmp_path / 'bad.json'
        bad.write_text('not json')
        is_valid, error = validate_json_file(bad, CatalogFile)
        assert not is_valid
        assert error.startswith('Invalid JSON')


class TestGameConfig:
    """Tests for game configuration."""

    def test_defaults(self):
        config = GameConfig()
        assert config.mode == 'single'
        assert config.single_player_lives == 3
        assert config.team_lives == 4
        assert config.wrong_flash_seconds == 0.5

    def test_invalid_mode(self):
        with pytest.raises(ValidationError):
            GameConfig(mode='coop')

    def test_shipped_config(self):
        clear_config_cache()
        config = get_config()
        assert config.mode == 'single'
        assert get_starting_lives('single') == 3
        assert get_starting_lives('team') == 4

    def test_missing_config_falls_back(self, tmp_path, monkeypatch):
        monkeypatch.setattr('feud.config.CONFIG_PATH', tmp_path / 'game_config.json')
        clear_config_cache()
        try:
            assert get_config() == GameConfig()
        finally:
            clear_config_cache()

    def test_config_overrides_lives(self, tmp_path, monkeypatch):
        path = write_json(tmp_path / 'game_config.json', {'single_player_lives': 5})
        monkeypatch.setattr('feud.config.CONFIG_PATH', path)
        clear_config_cache()
        try:
            assert get_starting_lives('single') == 5
            assert get_starting_lives('team') == 4
        finally:
            clear_config_cache()
