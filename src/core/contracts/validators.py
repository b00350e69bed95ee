"""
Reward Contracts — JSON Schema контракты ядра наград QRON

Схемы поставляются внутри пакета (src/core/contracts/schema/*.json) и читаются
через importlib.resources, поэтому валидация работает и из установленного
дистрибутива, а не только из checkout репозитория.

Контракты:
- claim_input   — заявка от веб-клиента (camelCase, скоры числом или строкой)
- reward_result — результат расчёта (суммы десятичными строками, до 18 знаков)

Схемы и скомпилированные валидаторы загружаются лениво, при первом обращении:
импорт модуля не читает файлов.
"""

import json
from functools import lru_cache
from importlib.resources import files
from pathlib import Path
from typing import Any, Dict, Final, Iterator

import jsonschema
from jsonschema import Draft202012Validator

# Пакет, в котором лежит каталог schema/
SCHEMA_PACKAGE: Final[str] = "src.core.contracts"

CLAIM_INPUT_SCHEMA: Final[str] = "claim_input"
REWARD_RESULT_SCHEMA: Final[str] = "reward_result"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов и кэш скомпилированных валидаторов.

    По умолчанию читает схемы, поставляемые с пакетом. Каталог можно
    переопределить (любой объект с интерфейсом pathlib.Path/Traversable).
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = (
            schema_dir if schema_dir is not None else files(SCHEMA_PACKAGE) / "schema"
        )
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}
        self._validators: Dict[str, Draft202012Validator] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema по имени.

        Args:
            schema_name: Имя схемы без расширения (например, 'claim_input')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema 2020-12
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        resource = self._schema_dir / f"{schema_name}.json"
        if not resource.is_file():
            raise FileNotFoundError(f"Schema not found: {resource}")

        schema = json.loads(resource.read_text(encoding="utf-8"))

        # Meta-validation
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e.message}")

        self._schemas[schema_name] = schema
        return schema

    def get_validator(self, schema_name: str) -> Draft202012Validator:
        """Скомпилированный валидатор схемы (создаётся один раз на загрузчик)."""
        validator = self._validators.get(schema_name)
        if validator is None:
            validator = Draft202012Validator(self.load_schema(schema_name))
            self._validators[schema_name] = validator
        return validator


@lru_cache()
def get_schema_loader() -> SchemaLoader:
    """Общий загрузчик пакетных схем (создаётся при первом вызове)."""
    return SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Валидатор payload против одного контракта.

    Подклассы фиксируют имя схемы атрибутом класса schema_name.
    """

    schema_name: str = ""

    def __init__(self, schema_name: str | None = None, loader: SchemaLoader | None = None):
        if schema_name is not None:
            self.schema_name = schema_name
        self.validator = (loader or get_schema_loader()).get_validator(self.schema_name)
        self.schema = self.validator.schema

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация payload.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[jsonschema.ValidationError]:
        return self.validator.iter_errors(data)


class ClaimInputValidator(ContractValidator):
    """Контракт заявки веб-клиента."""

    schema_name = CLAIM_INPUT_SCHEMA


class RewardResultValidator(ContractValidator):
    """Контракт результата расчёта награды."""

    schema_name = REWARD_RESULT_SCHEMA


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_payload(schema_name: str, data: Dict[str, Any]) -> None:
    """
    Валидация payload против пакетной схемы по имени.

    Raises:
        FileNotFoundError: Неизвестное имя схемы
        ValidationError: Если данные не соответствуют схеме
    """
    get_schema_loader().get_validator(schema_name).validate(data)


def validate_claim_input(data: Dict[str, Any]) -> None:
    """Валидация заявки (camelCase payload веб-клиента или ClaimInput.to_payload())."""
    validate_payload(CLAIM_INPUT_SCHEMA, data)


def validate_reward_result(data: Dict[str, Any]) -> None:
    """Валидация результата (RewardResult.to_payload())."""
    validate_payload(REWARD_RESULT_SCHEMA, data)
