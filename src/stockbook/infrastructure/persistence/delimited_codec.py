"""Line codec for the persisted inventory file.

One product per line: ``name,quantity,price,last_updated``. Fields are
not escaped, so a name containing a comma produces a line that will
not decode back into a record.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from stockbook.domain.exceptions import MalformedRecordError, ValidationError
from stockbook.domain.model.product import Product
from stockbook.domain.model.value_objects import Money

DELIMITER = ","
FIELD_COUNT = 4


def encode_product(product: Product) -> str:
    return DELIMITER.join(
        [
            product.name,
            str(product.quantity),
            product.price.plain(),
            product.last_updated,
        ]
    )


def decode_line(line: str) -> Product | None:
    """Turn one line back into a Product.

    Returns None when the line does not split into exactly four fields.
    Raises MalformedRecordError when the fields are there but the
    quantity or price cannot be parsed.
    """
    fields = line.rstrip("\r\n").split(DELIMITER)
    if len(fields) != FIELD_COUNT:
        return None

    name, raw_quantity, raw_price, last_updated = fields
    try:
        quantity = int(raw_quantity)
        price = Money(Decimal(raw_price))
        return Product(
            name=name,
            quantity=quantity,
            price=price,
            last_updated=last_updated,
        )
    except (ValueError, InvalidOperation, ValidationError) as exc:
        raise MalformedRecordError(f"Cannot decode product line: {exc}", line) from exc
