"""
JSON Schema Contract Validators

Модуль для валидации JSON данных согласно формальным JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы:
- line_item.json (interchange surface LineItem: {name, price, quantity})
"""

import json
from pathlib import Path
from typing import Any, Dict, Final, Iterator, Optional, Union

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from invoice_generator.utils.logging import get_logger, is_logging_configured

logger = get_logger(__name__)


# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================

# Каталог схем внутри пакета contracts
DEFAULT_SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"

LINE_ITEM_SCHEMA: Final[str] = "line_item"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    По умолчанию читает схемы из contracts/schema/ внутри пакета.
    """

    def __init__(self, schema_dir: Optional[Union[str, Path]] = None):
        self._schema_dir = Path(schema_dir) if schema_dir is not None else DEFAULT_SCHEMA_DIR
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'line_item')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            json.JSONDecodeError: Если файл не является валидным JSON
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e.message}") from e

        if is_logging_configured():
            logger.debug("Loaded contract schema", schema_name=schema_name, path=str(schema_path))
        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str, loader: Optional[SchemaLoader] = None):
        """
        Инициализация валидатора.

        Args:
            schema_name: Имя схемы для валидации
            loader: Загрузчик схем (по умолчанию глобальный)
        """
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        try:
            self.validator.validate(data)
        except ValidationError as e:
            if is_logging_configured():
                logger.warning(
                    "Contract violation",
                    schema_name=self.schema_name,
                    path=list(e.absolute_path),
                    error=e.message,
                )
            raise

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """
        Итератор по всем ошибкам валидации.

        Yields:
            ValidationError объекты для каждой найденной ошибки
        """
        return self.validator.iter_errors(data)


class LineItemValidator(ContractValidator):
    """Валидатор для line_item контракта."""

    def __init__(self, loader: Optional[SchemaLoader] = None):
        super().__init__(LINE_ITEM_SCHEMA, loader=loader)


# Глобальный экземпляр валидатора line_item
_LINE_ITEM_VALIDATOR = LineItemValidator()


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_line_item(data: Dict[str, Any]) -> None:
    """
    Валидация line_item данных.

    Args:
        data: Данные для валидации

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    _LINE_ITEM_VALIDATOR.validate(data)
