from decimal import Decimal

import pytest
from sqlalchemy import update

from app.data.models.cart import CartModel
from app.domain.errors import ConflictError, NotFoundError
from app.services.cart_service import CartService
from app.services.catalog_service import CatalogService
from app.services.pricing_service import PricingService


def test_recalculate_sums_lines_at_catalog_prices(db, customer, catalog):
    carts = CartService(db)
    carts.add_or_update_line(customer.id, catalog["A"], 2)
    carts.add_or_update_line(customer.id, catalog["B"], 1)

    cart = carts.load_cart(customer.id)
    assert cart.total_price == Decimal("25.00")
    assert cart.quantity == 3


def test_recalculate_picks_up_new_catalog_price(db, customer, catalog):
    carts = CartService(db)
    carts.add_or_update_line(customer.id, catalog["A"], 3)

    CatalogService(db).update_item(catalog["A"], price="9.99")
    result = carts.recalculate(customer.id)

    assert Decimal(result["total_price"]) == Decimal("29.97")
    assert result["quantity"] == 3
    assert result["items"] == [{"item_id": catalog["A"], "quantity": 3, "price": Decimal("9.99")}]


def test_decimal_totals_do_not_drift(db, customer, catalog):
    svc = CatalogService(db)
    cheap = svc.create_item(catalog["pizzeria"], "Dip", "0.10").id

    carts = CartService(db)
    for quantity in range(1, 31):
        carts.add_or_update_line(customer.id, cheap, quantity)

    cart = carts.load_cart(customer.id)
    assert cart.total_price == Decimal("3.00")
    assert cart.quantity == 30


def test_price_lines_of_empty_cart(db, customer):
    CartService(db).get_or_create_cart(customer.id)
    db.commit()

    pricing = PricingService(db).price_lines(customer.id)

    assert pricing.lines == ()
    assert pricing.total_price == Decimal("0.00")
    assert pricing.quantity == 0


def test_recalculate_bumps_version(db, customer, catalog):
    carts = CartService(db)
    carts.add_or_update_line(customer.id, catalog["A"], 1)
    before = carts.load_cart(customer.id).version

    carts.recalculate(customer.id)

    assert carts.load_cart(customer.id).version == before + 1


def test_recalculate_detects_concurrent_modification(db, customer, catalog):
    carts = CartService(db)
    carts.add_or_update_line(customer.id, catalog["A"], 1)
    cart = carts.load_cart(customer.id)

    #inna transakcja podbila wersje, obiekt w sesji ma stara
    db.execute(
        update(CartModel)
        .where(CartModel.id == cart.id)
        .values(version=cart.version + 1)
        .execution_options(synchronize_session=False)
    )

    with pytest.raises(ConflictError):
        PricingService(db).recalculate(cart.id)


def test_recalculate_missing_cart(db):
    with pytest.raises(NotFoundError):
        PricingService(db).recalculate(999)
