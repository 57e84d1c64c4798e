"""Settings library for the application configuration.

Provides:
    - Schema validation and enforcement for the settings.json structure.
    - Loading, saving, reverting and managing application settings.
    - A lazily created module-level :class:`SettingsAPI` instance.
"""

import json
import logging
import pathlib
import re
import shutil
from typing import Dict, Any, Optional, List

from PySide6 import QtCore

from ..status import status

app_name: str = 'SimpleExpenseTracker'


def is_valid_hex_color(value: str) -> bool:
    """Check if a string is a valid hexadecimal color in #RRGGBB format.

    Args:
        value (str): Color string to validate.

    Returns:
        bool: True if value matches '#RRGGBB', False otherwise.
    """
    return bool(re.fullmatch(r'#[0-9A-Fa-f]{6}', value))


METADATA_KEYS: List[str] = [
    'name',
    'description',
    'locale',
]

SETTINGS_SCHEMA: Dict[str, Any] = {
    'metadata': {
        'type': dict,
        'required': True,
        'required_keys': METADATA_KEYS,
        'item_schema': {
            'name': {'type': str, 'required': True},
            'description': {'type': str, 'required': True},
            'locale': {'type': str, 'required': True},
        }
    },
    'categories': {
        'type': dict,
        'required': True,
        'item_schema': {
            'display_name': {'type': str, 'required': True},
            'color': {'type': str, 'required': True, 'format': 'hexcolor'},
            'description': {'type': str, 'required': True},
        }
    }
}


def _validate_metadata(metadata_dict: Dict[str, Any], specs: Dict[str, Any]) -> None:
    """Validate the 'metadata' section of the settings.

    Args:
        metadata_dict: Mapping of metadata keys to values.
        specs: Schema dict containing 'required_keys' and 'item_schema'.

    Raises:
        ValueError: If a required key is missing.
        TypeError: If a value is not of the expected type.
    """
    logging.debug('Validating "metadata" section.')
    missing = [k for k in specs['required_keys'] if k not in metadata_dict]
    if missing:
        msg: str = f'Missing metadata keys: {missing}'
        logging.error(msg)
        raise ValueError(msg)

    for key, field_specs in specs['item_schema'].items():
        if not isinstance(metadata_dict[key], field_specs['type']):
            msg = f'Metadata key "{key}" must be {field_specs["type"]}, got {type(metadata_dict[key])}.'
            logging.error(msg)
            raise TypeError(msg)


def _validate_categories(categories_dict: Dict[str, Any], item_schema: Dict[str, Any]) -> None:
    """Validate the 'categories' section of the settings.

    Ensures categories_dict maps category names to dicts of required fields matching item_schema.

    Args:
        categories_dict: Mapping of category identifiers to their configuration dicts.
        item_schema: Dict describing required fields, types, and format constraints.

    Raises:
        TypeError: If categories_dict is not a dict or category entries are not dicts or wrong types.
        ValueError: If a required field is missing or fails format validation (e.g., hexcolor).
    """
    logging.debug('Validating "categories" section.')
    if not isinstance(categories_dict, dict):
        msg: str = '"categories" must be a dict.'
        logging.error(msg)
        raise TypeError(msg)
    for cat_name, cat_info in categories_dict.items():
        if not isinstance(cat_info, dict):
            msg = f'Category "{cat_name}" must be a dict.'
            logging.error(msg)
            raise TypeError(msg)
        for field, field_specs in item_schema.items():
            if field_specs['required'] and field not in cat_info:
                msg = f'Category "{cat_name}" missing "{field}".'
                logging.error(msg)
                raise ValueError(msg)
            if field not in cat_info:
                continue
            if not isinstance(cat_info[field], field_specs['type']):
                msg = (
                    f'Category "{cat_name}" field "{field}" must be {field_specs["type"]}, '
                    f'got {type(cat_info[field])}.'
                )
                logging.error(msg)
                raise TypeError(msg)
            if field_specs.get('format') == 'hexcolor':
                if not is_valid_hex_color(cat_info[field]):
                    msg = (
                        f'Category "{cat_name}" field "{field}" must be a valid '
                        f'hex color (#RRGGBB), got "{cat_info[field]}".'
                    )
                    logging.error(msg)
                    raise ValueError(msg)


class ConfigPaths:
    """Manage application file paths and ensure the default settings template is in place.

    Args:
        config_dir: Optional directory holding settings.json. Defaults to the
            ``config`` folder of the platform's application data location.
    """

    def __init__(self, config_dir: Optional[str] = None) -> None:
        if config_dir:
            self.config_dir: pathlib.Path = pathlib.Path(config_dir)
        else:
            QtCore.QCoreApplication.setApplicationName(app_name)
            QtCore.QCoreApplication.setOrganizationName('')
            logging.debug(f'Setting application name: {app_name}')

            p = QtCore.QStandardPaths.writableLocation(QtCore.QStandardPaths.AppDataLocation)
            app_data_dir = pathlib.Path(p)
            logging.debug(f'Using app data directory: {app_data_dir}')
            self.config_dir = app_data_dir / 'config'

        self.template_dir: pathlib.Path = pathlib.Path(__file__).parent.parent / 'config'
        self.settings_template: pathlib.Path = self.template_dir / 'settings.json.template'
        self.settings_path: pathlib.Path = self.config_dir / 'settings.json'

        self._verify_and_prepare()

    def _verify_and_prepare(self) -> None:
        """Verify the template exists, create the config directory and copy the default settings.

        Raises:
            FileNotFoundError: If the settings template is missing.
        """
        logging.debug(f'Verifying settings template in {self.template_dir}')
        if not self.settings_template.exists():
            msg: str = f'Missing settings template: {self.settings_template}'
            logging.error(msg)
            raise FileNotFoundError(msg)

        if not self.config_dir.exists():
            logging.debug(f'Creating config directory: {self.config_dir}')
            self.config_dir.mkdir(parents=True, exist_ok=True)

        # Ensure a valid config exists even if we haven't yet set it up
        if not self.settings_path.exists():
            logging.debug(f'Copying default settings from template to {self.settings_path}')
            shutil.copy(self.settings_template, self.settings_path)

    def revert_settings_to_template(self) -> None:
        """Restore settings.json from the default template file.

        Raises:
            FileNotFoundError: If the settings template file is missing.
        """
        logging.debug(f'Reverting settings to template: {self.settings_template}')
        if not self.settings_template.exists():
            msg: str = f'Settings template not found: {self.settings_template}'
            logging.error(msg)
            raise FileNotFoundError(msg)
        shutil.copy(self.settings_template, self.settings_path)


class SettingsAPI(ConfigPaths):
    """
    Provides an interface to get/set/revert/save settings.json sections.
    """

    def __init__(self, config_dir: Optional[str] = None) -> None:
        super().__init__(config_dir=config_dir)

        self._signals_blocked: bool = False

        self.settings_data: Dict[str, Any] = {}
        for k in SETTINGS_SCHEMA.keys():
            self.settings_data[k] = {}

        self.load_settings()

    def __getitem__(self, key: str) -> Any:
        """Retrieve a metadata value using dictionary-style access.

        Args:
            key: Metadata key to retrieve.

        Returns:
            Value stored for the metadata key.

        Raises:
            KeyError: If key is not in METADATA_KEYS.
        """
        if key not in METADATA_KEYS:
            raise KeyError(f'Invalid metadata key: {key}, must be one of {METADATA_KEYS}')

        _type = SETTINGS_SCHEMA['metadata']['item_schema'][key]['type']
        v = self.settings_data['metadata'].get(key)

        if not isinstance(v, _type):
            logging.error(f'Metadata key "{key}" is not of type {_type}, got {type(v)}.')
            return None

        return v

    def __setitem__(self, key: str, value: Any) -> None:
        """Assign a metadata value using dictionary-style access and persist it.

        Args:
            key: Metadata key to set.
            value: Value to assign to the metadata key.

        Raises:
            KeyError: If key is not in METADATA_KEYS.
        """
        if key not in METADATA_KEYS:
            raise KeyError(f'Invalid metadata key: {key}, must be one of {METADATA_KEYS}')

        _type = SETTINGS_SCHEMA['metadata']['item_schema'][key]['type']
        if not isinstance(value, _type):
            logging.warning(f'Metadata key "{key}" is not of type {_type}, got {type(value)}.')
            value = _type(value)

        self.settings_data['metadata'][key] = value
        self.save_section('metadata')

        if self._signals_blocked:
            return

        from ..ui.actions import signals
        signals.metadataChanged.emit(key, value)

    def block_signals(self, v: bool) -> None:
        """Enable or disable emission of configuration change signals.

        Args:
            v: True to block signals, False to allow signals to emit.
        """
        self._signals_blocked = v

    def load_settings(self) -> Dict[str, Any]:
        """Load settings.json from disk and validate against the schema.

        Returns:
            The loaded settings dictionary.

        Raises:
            status.SettingsNotFoundException: If settings.json is missing.
            status.SettingsInvalidException: If JSON parsing or validation fails.
        """
        logging.debug(f'Loading settings from "{self.settings_path}"')
        if not self.settings_path.exists():
            raise status.SettingsNotFoundException(str(self.settings_path))

        try:
            with self.settings_path.open('r', encoding='utf-8') as f:
                data: Dict[str, Any] = json.load(f)
            self.validate_settings_data(data=data)
        except status.SettingsInvalidException:
            raise
        except (ValueError, TypeError) as ex:
            raise status.SettingsInvalidException(str(ex)) from ex

        self.settings_data = data
        return self.settings_data

    def validate_settings_data(self, data: Optional[Dict[str, Any]] = None) -> None:
        """Validate settings data against SETTINGS_SCHEMA.

        Args:
            data (dict, optional): Settings data to validate. Defaults to self.settings_data.

        Raises:
            status.SettingsInvalidException: If a required section is missing or has the wrong type.
            ValueError, TypeError: If a section's content fails validation.
        """
        if data is None:
            data = self.settings_data
        if not data:
            raise status.SettingsInvalidException('Settings data is empty.')

        logging.debug('Validating settings data against schema.')
        for field, specs in SETTINGS_SCHEMA.items():
            if specs.get('required') and field not in data:
                raise status.SettingsInvalidException(f'Missing required field: {field}')

            if not isinstance(data[field], specs['type']):
                msg = f'Field "{field}" must be {specs["type"]}, got {type(data[field])}.'
                raise status.SettingsInvalidException(msg)

            if field == 'metadata':
                _validate_metadata(data[field], specs)
            elif field == 'categories':
                _validate_categories(data[field], specs['item_schema'])

        logging.debug('Settings data is valid.')

    def get_section(self, section_name: str) -> Dict[str, Any]:
        """Retrieve a copy of a settings section.

        Args:
            section_name: Key from the settings schema.

        Returns:
            A copied dict of the requested section data.

        Raises:
            KeyError: If section_name is not in settings_data.
        """
        return self.settings_data[section_name].copy()

    def set_section(self, section_name: str, new_data: Dict[str, Any]) -> None:
        """Replace, validate and persist a settings section.

        The previous section data is restored if validation fails.

        Args:
            section_name: Section to update.
            new_data: New data dict for the section.

        Raises:
            ValueError: If section_name is unrecognized or new_data fails validation.
            TypeError: If new_data has invalid types.
        """
        if section_name not in self.settings_data:
            msg: str = f'Unknown section_name for set: "{section_name}"'
            logging.error(msg)
            raise ValueError(msg)

        current_section_data: Dict[str, Any] = self.settings_data[section_name].copy()

        self.settings_data[section_name] = new_data
        try:
            self.validate_settings_data()
        except (ValueError, TypeError) as e:
            logging.error(f'Validation error on set_section("{section_name}"): {e}')
            self.settings_data[section_name] = current_section_data
            raise

        self.save_section(section_name)

        if self._signals_blocked:
            return

        from ..ui.actions import signals
        signals.configSectionChanged.emit(section_name)

    def revert_section(self, section_name: str) -> None:
        """Revert a settings section to its template default and save.

        Args:
            section_name: Section to revert.

        Raises:
            ValueError: If section_name is invalid or not present in the template.
        """
        if section_name not in self.settings_data:
            msg: str = f'Unknown section_name for revert: "{section_name}"'
            logging.error(msg)
            raise ValueError(msg)

        with self.settings_template.open('r', encoding='utf-8') as f:
            template_data: Dict[str, Any] = json.load(f)

        if section_name not in template_data:
            msg = f'No template-based revert logic for section "{section_name}".'
            logging.error(msg)
            raise ValueError(msg)

        self.settings_data[section_name] = template_data[section_name]
        self.save_section(section_name)

        if self._signals_blocked:
            return

        from ..ui.actions import signals
        signals.configSectionChanged.emit(section_name)

    def save_section(self, section_name: str) -> None:
        """Persist a single settings section to settings.json.

        Args:
            section_name: The section to save.

        Raises:
            ValueError: If section_name is not recognized.
        """
        if section_name not in self.settings_data:
            msg: str = f'Unknown section_name for save: "{section_name}"'
            logging.error(msg)
            raise ValueError(msg)

        with self.settings_path.open('r', encoding='utf-8') as f:
            original_data: Dict[str, Any] = json.load(f)

        new_data: Dict[str, Any] = original_data.copy()
        new_data[section_name] = self.settings_data[section_name]

        logging.debug(f'Saving section "{section_name}" to "{self.settings_path}"')
        with self.settings_path.open('w', encoding='utf-8') as f:
            json.dump(new_data, f, indent=4, ensure_ascii=False)

    def category_names(self) -> List[str]:
        """Return the configured category names in file order."""
        return list(self.settings_data.get('categories', {}).keys())


settings: Optional[SettingsAPI] = None


def get_settings() -> SettingsAPI:
    """Return the module-level SettingsAPI, creating it on first use."""
    global settings
    if settings is None:
        settings = SettingsAPI()
    return settings
