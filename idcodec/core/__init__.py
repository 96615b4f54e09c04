"""idcodec.core — identity number value type, check code, errors, results."""

from idcodec.core.checksum import (
    append_check_code as append_check_code,
)
from idcodec.core.checksum import (
    compute_check_code as compute_check_code,
)
from idcodec.core.checksum import (
    validate_check_code as validate_check_code,
)
from idcodec.core.errors import (
    CodecError as CodecError,
)
from idcodec.core.errors import (
    ErrorKind as ErrorKind,
)
from idcodec.core.identity import (
    IdentityNumber as IdentityNumber,
)
from idcodec.core.identity import (
    is_valid_identity_number as is_valid_identity_number,
)
from idcodec.core.result import (
    Err as Err,
)
from idcodec.core.result import (
    Ok as Ok,
)
from idcodec.core.result import (
    Result as Result,
)
from idcodec.core.result import (
    unwrap as unwrap,
)
