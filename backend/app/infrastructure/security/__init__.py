from .bcrypt_password_hasher import BcryptPasswordHasher
from .jose_token_issuer import JoseTokenIssuer

__all__ = ["BcryptPasswordHasher", "JoseTokenIssuer"]
