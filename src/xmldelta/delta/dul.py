"""DUL (Diff Update Language) encoding of change logs.

A DUL document has a ``delta`` root with one child element per change
record, in log order::

    <delta>
      <insert childno="2" name="item" nodetype="1" parent="/node()[1]"/>
      <delete node="/node()[1]/node()[4]" charpos="3" length="5"/>
      <move node="/node()[1]/node()[2]" old_charpos="1" new_charpos="1"
            parent="/node()[1]/node()[3]" childno="1"/>
      <update node="/node()[1]/@id">42</update>
    </delta>

Which optional fields become attributes, and the tag used for updates, are
controlled by ``DeltaConfig``.
"""

from typing import Any, Optional

from lxml import etree

from xmldelta.shared import DeltaConfig, EmissionPolicy, get_logger
from xmldelta.tree import NodeKind

from .changelog import ChangeLog
from .changes import Delete, Insert, InvalidChangeError, Move, Update

# Element names
DELTA = "delta"
INSERT = "insert"
DELETE = "delete"
MOVE = "move"

# Attribute names
CHARPOS = "charpos"
CHILDNO = "childno"
LENGTH = "length"
NAME = "name"
NEW_CHARPOS = "new_charpos"
NODE = "node"
NODETYPE = "nodetype"
OLD_CHARPOS = "old_charpos"
PARENT = "parent"


class DULEncoder:
    """Builds DUL documents from change logs.

    The encoder keeps no state between calls; encoding never modifies the
    log, so the same log always yields the same document.
    """

    def __init__(self, config: Optional[DeltaConfig] = None) -> None:
        self.config = config if config is not None else DeltaConfig()
        self.logger = get_logger(__name__, self.config.correlation_id, "dul")

    def _is_present(self, value: Any) -> bool:
        if value is None:
            return False
        if self.config.emission_policy is EmissionPolicy.TRUTHY:
            return bool(value)
        return True

    def _set(self, element: etree._Element, name: str, value: Any) -> None:
        if isinstance(value, NodeKind):
            value = value.value
        if self._is_present(value):
            element.set(name, str(value))

    def _set_text(self, element: etree._Element, value: Optional[str]) -> bool:
        if self._is_present(value):
            element.text = value
            return True
        return False

    def _append_insert(self, delta: etree._Element, change: Insert) -> None:
        element = etree.SubElement(delta, INSERT)
        self._set(element, CHARPOS, change.charpos)
        self._set(element, CHILDNO, change.child_no)
        self._set(element, NAME, change.node_name)
        self._set(element, NODETYPE, change.node_kind)
        self._set(element, PARENT, change.parent)
        self._set_text(element, change.value)

    def _append_delete(self, delta: etree._Element, change: Delete) -> None:
        element = etree.SubElement(delta, DELETE)
        self._set(element, CHARPOS, change.charpos)
        self._set(element, LENGTH, change.length)
        self._set(element, NODE, change.node)

    def _append_move(self, delta: etree._Element, change: Move) -> None:
        element = etree.SubElement(delta, MOVE)
        self._set(element, NODE, change.node)
        self._set(element, OLD_CHARPOS, change.old_charpos)
        self._set(element, NEW_CHARPOS, change.new_charpos)
        self._set(element, PARENT, change.parent)
        self._set(element, CHILDNO, change.child_no)
        self._set(element, LENGTH, change.length)

    def _append_update(self, delta: etree._Element, change: Update) -> None:
        element = etree.SubElement(delta, self.config.update_tag)
        self._set(element, NODE, change.node)
        if not self._set_text(element, change.node_name):
            self._set_text(element, change.node_value)

    def encode(self, log: ChangeLog) -> etree._ElementTree:
        """Build the DUL document for log.

        Raises:
            InvalidChangeError: If the log holds something other than an
                insert, delete, move or update record
        """
        delta = etree.Element(DELTA)

        for change in log.get_changes():
            if isinstance(change, Insert):
                self._append_insert(delta, change)
            elif isinstance(change, Delete):
                self._append_delete(delta, change)
            elif isinstance(change, Move):
                self._append_move(delta, change)
            elif isinstance(change, Update):
                self._append_update(delta, change)
            else:
                self.logger.error(
                    "Invalid operation in change log",
                    extra={"change_type": type(change).__name__},
                    exc_info=False
                )
                raise InvalidChangeError(f"Invalid operation: {change!r}")

        self.logger.info(
            f"Encoded {len(delta)} changes",
            extra={"statistics": log.statistics().to_dict()}
        )
        return etree.ElementTree(delta)

    def to_string(self, log: ChangeLog) -> str:
        """Encode log and serialize it with an XML declaration."""
        document = self.encode(log)
        serialized = etree.tostring(
            document,
            xml_declaration=True,
            encoding=self.config.encoding,
            standalone=self.config.standalone,
            pretty_print=self.config.pretty_print,
        )
        return serialized.decode(self.config.encoding)


def encode(log: ChangeLog, config: Optional[DeltaConfig] = None) -> etree._ElementTree:
    """Build the DUL document for a change log."""
    return DULEncoder(config).encode(log)


def to_dul(log: ChangeLog, config: Optional[DeltaConfig] = None) -> str:
    """Serialize a change log as a DUL document string."""
    return DULEncoder(config).to_string(log)
