from src.shop_admin.core.models.user import (
    AddressRequest,
    AddressResponse,
    UserCreationRequest,
    UserResponse,
    UserUpdateRequest,
)
from src.shop_admin.entities.core.user import AddressTable, UserTable


def to_address_table(request: AddressRequest) -> AddressTable:
    return AddressTable(**request.model_dump())


def to_user_table(request: UserCreationRequest, password_hash: str) -> UserTable:
    """Build a user row; addresses are attached so each points back at the user."""
    user = UserTable(
        username=request.username,
        email=request.email,
        password_hash=password_hash,
        first_name=request.first_name,
        last_name=request.last_name,
        phone=request.phone,
        dob=request.dob,
    )
    user.addresses = [to_address_table(address) for address in request.addresses]
    return user


def apply_user_update(user: UserTable, request: UserUpdateRequest) -> UserTable:
    """Copy the non-null profile fields of ``request`` onto ``user``.

    The password is not copied; the caller hashes it.
    """
    if request.email is not None:
        user.email = request.email
    if request.first_name is not None:
        user.first_name = request.first_name
    if request.last_name is not None:
        user.last_name = request.last_name
    if request.phone is not None:
        user.phone = request.phone
    if request.dob is not None:
        user.dob = request.dob
    return user


def to_address_response(address: AddressTable) -> AddressResponse:
    return AddressResponse(
        id=address.id,
        street=address.street,
        city=address.city,
        country=address.country,
        postal_code=address.postal_code,
        phone=address.phone,
    )


def to_user_response(user: UserTable) -> UserResponse:
    return UserResponse(
        id=user.id,
        username=user.username,
        email=user.email,
        first_name=user.first_name,
        last_name=user.last_name,
        phone=user.phone,
        dob=user.dob,
        status=user.status,
        roles=user.role_names,
        addresses=[to_address_response(address) for address in user.addresses],
        created_at=user.created_at,
    )
