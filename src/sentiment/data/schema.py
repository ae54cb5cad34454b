"""Conversion between host document payloads and domain entities."""
from __future__ import annotations

from typing import Any, Dict, List, Mapping

from sentiment.data.errors import DataValidationError
from sentiment.domain.entities import (
    NO_SWING,
    Attribute,
    Character,
    CustomRoll,
    Gift,
    Health,
    Swing,
    SwingTokenImages,
)
from sentiment.domain.entities.character import DEFAULT_TOKEN_IMAGE_PATH
from sentiment.domain.entities.custom_roll import DEFAULT_ADDED_FORMULA, DEFAULT_ROLL_TYPE
from sentiment.domain.enums import AttributeStatus, GiftEquipStatus
from sentiment.domain.gift_ordering import SORT_DENSITY

Payload = Dict[str, Any]

ITEM_TYPE_ATTRIBUTE = "attribute"
ITEM_TYPE_GIFT = "gift"
ITEM_TYPE_CUSTOM_ROLL = "customRoll"


def character_from_payload(payload: Mapping[str, Any]) -> Character:
    """Build a Character from a host actor payload, applying schema defaults."""
    payload = _require_mapping(payload, "character")
    system = _require_mapping(payload.get("system") or {}, "character.system")
    health_raw = _require_mapping(system.get("health") or {}, "system.health")
    swing_raw = _require_mapping(system.get("swing") or {}, "system.swing")
    token_images_raw = _require_mapping(system.get("swingTokenImages") or {}, "system.swingTokenImages")
    token_raw = payload.get("token")

    character = Character(
        id=_require_str(payload.get("_id"), "character._id"),
        name=_require_str(payload.get("name"), "character.name"),
        description=_coerce_str(system.get("description"), "system.description", default=""),
        health=Health(
            value=_coerce_int(health_raw.get("value"), "system.health.value", default=10),
            min=_coerce_int(health_raw.get("min"), "system.health.min", default=0),
            max=_coerce_int(health_raw.get("max"), "system.health.max", default=10),
        ),
        speed=_coerce_int(system.get("speed"), "system.speed", default=30, minimum=0),
        experience=_coerce_int(system.get("experience"), "system.experience", default=0, minimum=0),
        swing=Swing(
            attribute_id=_coerce_str(swing_raw.get("attributeId"), "system.swing.attributeId", default=NO_SWING),
            value=_coerce_int(swing_raw.get("value"), "system.swing.value", default=0, minimum=0),
        ),
        swing_token_images=SwingTokenImages(
            enabled=_coerce_bool(token_images_raw.get("enabled"), "system.swingTokenImages.enabled", default=False),
            default_token_image_path=_coerce_str(
                token_images_raw.get("defaultTokenImagePath"),
                "system.swingTokenImages.defaultTokenImagePath",
                default=DEFAULT_TOKEN_IMAGE_PATH,
            ),
        ),
    )
    if token_raw is not None:
        token = _require_mapping(token_raw, "character.token")
        texture = _require_mapping(token.get("texture") or {}, "character.token.texture")
        character.is_token = True
        character.token_image_path = _coerce_optional_str(texture.get("src"), "character.token.texture.src")

    items = payload.get("items") or []
    if not isinstance(items, list):
        raise DataValidationError("character.items must be a list.")
    raw_items = [_require_mapping(item, f"character.items[{index}]") for index, item in enumerate(items)]
    for index, item in sorted(enumerate(raw_items), key=lambda pair: _item_sort(pair[1], pair[0])):
        _add_item(character, item, f"character.items[{index}]")
    swing_attribute = character.find_attribute(character.swing.attribute_id)
    if swing_attribute is None or not swing_attribute.is_normal:
        character.swing = Swing()
    return character


def character_to_payload(character: Character) -> Payload:
    """Serialize a Character back into the host actor payload shape."""
    items: List[Payload] = []
    for index, attribute in enumerate(character.attributes):
        items.append(
            {
                "_id": attribute.id,
                "name": attribute.name,
                "type": ITEM_TYPE_ATTRIBUTE,
                "sort": index * SORT_DENSITY,
                "system": {
                    "modifier": attribute.modifier,
                    "status": int(attribute.status),
                    "descriptiveName": attribute.descriptive_name,
                    "customTokenImagePath": attribute.custom_token_image_path,
                },
            }
        )
    for gift in character.gifts:
        items.append(
            {
                "_id": gift.id,
                "name": gift.name,
                "type": ITEM_TYPE_GIFT,
                "sort": gift.sort,
                "system": {"description": gift.description, "equipStatus": int(gift.equip_status)},
            }
        )
    for custom_roll in character.custom_rolls:
        system: Payload = {
            "rollType": custom_roll.roll_type,
            "formulaAddedToHit": custom_roll.formula_added_to_hit,
            "formulaAddedToEffect": custom_roll.formula_added_to_effect,
        }
        if custom_roll.additional_formula is not None:
            system["additionalFormula"] = custom_roll.additional_formula
        items.append(
            {
                "_id": custom_roll.id,
                "name": custom_roll.name,
                "type": ITEM_TYPE_CUSTOM_ROLL,
                "sort": custom_roll.sort,
                "system": system,
            }
        )

    payload: Payload = {
        "_id": character.id,
        "name": character.name,
        "type": "character",
        "system": {
            "description": character.description,
            "health": {
                "value": character.health.value,
                "min": character.health.min,
                "max": character.health.max,
            },
            "speed": character.speed,
            "experience": character.experience,
            "swing": {"attributeId": character.swing.attribute_id, "value": character.swing.value},
            "swingTokenImages": {
                "enabled": character.swing_token_images.enabled,
                "defaultTokenImagePath": character.swing_token_images.default_token_image_path,
            },
        },
        "items": items,
    }
    if character.is_token:
        payload["token"] = {"texture": {"src": character.token_image_path}}
    return payload


def _add_item(character: Character, item: Mapping[str, Any], context: str) -> None:
    item_type = _require_str(item.get("type"), f"{context}.type")
    item_id = _require_str(item.get("_id"), f"{context}._id")
    name = _require_str(item.get("name"), f"{context}.name")
    system = _require_mapping(item.get("system") or {}, f"{context}.system")
    sort = _item_sort(item, 0)

    if item_type == ITEM_TYPE_ATTRIBUTE:
        character.attributes.append(
            Attribute(
                id=item_id,
                name=name,
                modifier=_coerce_int(system.get("modifier"), f"{context}.system.modifier", default=0, minimum=0),
                status=_coerce_enum(system.get("status"), AttributeStatus, f"{context}.system.status"),
                descriptive_name=_coerce_str(system.get("descriptiveName"), f"{context}.system.descriptiveName", default=""),
                custom_token_image_path=_coerce_str(
                    system.get("customTokenImagePath"), f"{context}.system.customTokenImagePath", default=""
                ),
            )
        )
    elif item_type == ITEM_TYPE_GIFT:
        character.gifts.append(
            Gift(
                id=item_id,
                name=name,
                description=_coerce_str(system.get("description"), f"{context}.system.description", default=""),
                equip_status=_coerce_enum(system.get("equipStatus"), GiftEquipStatus, f"{context}.system.equipStatus"),
                sort=sort,
            )
        )
    elif item_type == ITEM_TYPE_CUSTOM_ROLL:
        character.custom_rolls.append(
            CustomRoll(
                id=item_id,
                name=name,
                roll_type=_coerce_str(system.get("rollType"), f"{context}.system.rollType", default=DEFAULT_ROLL_TYPE),
                formula_added_to_hit=_coerce_str(
                    system.get("formulaAddedToHit"), f"{context}.system.formulaAddedToHit", default=DEFAULT_ADDED_FORMULA
                ),
                formula_added_to_effect=_coerce_str(
                    system.get("formulaAddedToEffect"),
                    f"{context}.system.formulaAddedToEffect",
                    default=DEFAULT_ADDED_FORMULA,
                ),
                additional_formula=_coerce_optional_str(
                    system.get("additionalFormula"), f"{context}.system.additionalFormula"
                ),
                sort=sort,
            )
        )
    else:
        raise DataValidationError(f"{context}.type has unknown item type {item_type!r}.")


def _item_sort(item: Mapping[str, Any], fallback: int) -> float:
    value = item.get("sort")
    if value is None:
        return fallback
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DataValidationError("Item sort must be a number.")
    return value


def _require_mapping(value: object, context: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise DataValidationError(f"{context} must be an object/dict.")
    return value


def _require_str(value: object, context: str) -> str:
    if not isinstance(value, str) or not value:
        raise DataValidationError(f"{context} must be a non-empty string.")
    return value


def _coerce_str(value: object, context: str, *, default: str) -> str:
    if value is None:
        return default
    if not isinstance(value, str):
        raise DataValidationError(f"{context} must be a string.")
    return value


def _coerce_optional_str(value: object, context: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise DataValidationError(f"{context} must be a string.")
    return value


def _coerce_bool(value: object, context: str, *, default: bool) -> bool:
    if value is None:
        return default
    if not isinstance(value, bool):
        raise DataValidationError(f"{context} must be a boolean.")
    return value


def _coerce_int(value: object, context: str, *, default: int, minimum: int | None = None) -> int:
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, int):
        raise DataValidationError(f"{context} must be an integer.")
    if minimum is not None and value < minimum:
        raise DataValidationError(f"{context} must be >= {minimum}.")
    return value


def _coerce_enum(value: object, enum_type, context: str):
    raw = _coerce_int(value, context, default=0)
    try:
        return enum_type(raw)
    except ValueError as exc:
        raise DataValidationError(f"{context} has unknown value {raw}.") from exc
