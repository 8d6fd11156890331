"""Encoding selector: the character encoding hint for the parse step."""

from collections.abc import Sequence

from statement_intake.core.result import Failure, Result, Success
from statement_intake.domain.enums.character_encoding import CharacterEncoding
from statement_intake.domain.errors import IntakeMessage, InvalidEncodingError
from statement_intake.domain.protocols.logger_protocol import LoggerProtocol
from statement_intake.domain.protocols.notifier_protocol import NotifierProtocol
from statement_intake.domain.value_objects.notification import Notification


class EncodingSelector:
    """Current encoding choice over a configured domain.

    The choice starts at the first encoding of the domain and is never
    unset. Values are replaced unconditionally; nothing is checked against
    the selected file's content.
    """

    def __init__(
        self,
        notifier: NotifierProtocol,
        logger: LoggerProtocol,
        domain: Sequence[CharacterEncoding] = tuple(CharacterEncoding),
    ) -> None:
        if not domain:
            raise ValueError("Encoding domain cannot be empty")
        self._notifier = notifier
        self._logger = logger
        self._domain: tuple[CharacterEncoding, ...] = tuple(dict.fromkeys(domain))
        self._current = self._domain[0]

    def current_encoding(self) -> CharacterEncoding:
        """Return the current encoding."""
        return self._current

    def options(self) -> tuple[CharacterEncoding, ...]:
        """Return the selectable encodings in picker order."""
        return self._domain

    def set_encoding(
        self, value: str | CharacterEncoding
    ) -> Result[CharacterEncoding, InvalidEncodingError]:
        """Replace the current encoding.

        Args:
            value: Encoding member or picker value ("utf8", "utf16").

        Returns:
            Success(CharacterEncoding): New choice.
            Failure(InvalidEncodingError): Value outside the domain; the
                previous choice is kept.
        """
        encoding = CharacterEncoding.parse(value)

        if encoding is None or encoding not in self._domain:
            error = InvalidEncodingError.for_value(
                value, [option.value for option in self._domain]
            )
            self._logger.info(
                "Encoding rejected",
                value=error.value,
                kept_encoding=self._current.value,
            )
            self._notifier.notify(
                Notification.error(
                    IntakeMessage.INVALID_ENCODING_TITLE,
                    IntakeMessage.INVALID_ENCODING_DESCRIPTION.format(value=error.value),
                )
            )
            return Failure(error=error)

        previous = self._current
        self._current = encoding
        self._logger.debug(
            "Encoding changed",
            encoding=encoding.value,
            previous=previous.value,
        )
        return Success(value=encoding)
