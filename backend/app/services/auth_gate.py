"""Auth Gate — turns an Authorization header value into a Principal.

Invariants:
    - Missing header → MissingCredentialError; not "Bearer <token>" → MalformedCredentialError;
      verification failure → InvalidCredentialError (all AuthError, 401)
    - No side effects and no user re-fetch: claims are trusted for the request
"""

from app.core.domain_types import Principal
from app.core.parse_credential import extract_bearer_token, principal_from_claims
from app.core.repository_protocols import TokenCodec


class AuthGate:
    def __init__(self, codec: TokenCodec):
        self.codec = codec

    def authenticate(self, credential_header: str | None) -> Principal:
        token = extract_bearer_token(credential_header)
        return principal_from_claims(self.codec.verify(token))

    def issue(self, principal: Principal) -> str:
        """Sign a token whose claims authenticate back to principal."""
        return self.codec.sign(principal.to_claims())
