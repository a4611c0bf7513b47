""" rule-driven de-identification of DICOM datasets """
# coding=utf-8
import logging

from . import policy
from .tags import AttributeValue
from .dataset import is_opaque, is_list

LOGGER = logging.getLogger(__name__)


class TransformReport:
    """tags handled during one dataset transformation"""

    def __init__(self):
        self.applied = []  # rewritten by a rule
        self.skipped = []  # opaque values, left untouched
        self.removed = []  # unmapped tags
        self.redacted = []  # set to a placeholder value
        self.backfilled = []  # required tags added
        self.failed = []  # errors, left as-is

    def __repr__(self):
        counts = ", ".join(
            f"{name}={len(getattr(self, name))}"
            for name in ["applied", "skipped", "removed", "redacted", "backfilled", "failed"]
        )
        return f"TransformReport({counts})"


class Anonymizer:
    """apply rule set, sweep unmapped tags and backfill required attributes

    rules: sequence of Rule (default: policy.build_rules(source))
    backfill: insert default values for missing required attributes
    """

    def __init__(self, rules=None, backfill=True, source=None):
        if rules is None:
            rules = policy.build_rules(source)
        self.rules = tuple(rules)
        self.mapped = frozenset(rule.tag for rule in self.rules)
        self.backfill = backfill

    def __repr__(self):
        return f"Anonymizer({len(self.rules)} rules)"

    def transform(self, dicom):
        """de-identify DicomDataset in place"""
        report = TransformReport()
        self.apply_rules(dicom, report)
        self.sweep(dicom, report)
        if self.backfill:
            self.ensure_required(dicom, report)
        LOGGER.debug(f"Transformed {dicom}: {report}")
        return report

    def apply_rules(self, dicom, report):
        """apply each rule to its tag, if present"""
        for rule in self.rules:
            try:
                self._apply_rule(rule, dicom, report)
            except Exception as exc:
                LOGGER.error(f"Error applying rule to tag {rule.tag}: {exc}")
                report.failed.append(rule.tag)

    def _apply_rule(self, rule, dicom, report):
        tag = rule.tag
        if not tag in dicom:
            return

        vr = dicom.vr(tag)
        if is_opaque(vr):
            LOGGER.info(f"Skipping anonymization for tag {tag} with VR {vr}")
            report.skipped.append(tag)
            return

        if is_list(vr):
            # apply rule to each value
            values = dicom.get_values(tag)
            anonymized = []
            for value in values:
                new = rule.apply(AttributeValue(tag, value))
                anonymized.append(value if new is None else new)
            if anonymized != values:
                dicom.set(tag, anonymized)
            report.applied.append(tag)
            return

        value = dicom.get(tag)
        anonymized = rule.apply(AttributeValue(tag, value))
        if not anonymized and dicom.is_empty(tag):
            # empty attributes get a placeholder value
            try:
                dicom.set(tag, policy.DEFAULT_VALUE)
            except (ValueError, TypeError) as exc:
                LOGGER.warning(f"Could not add default value for tag {tag}: {exc}")
                return
            report.redacted.append(tag)

        elif anonymized is not None:
            if anonymized != value:
                dicom.set(tag, anonymized)
            report.applied.append(tag)

    def sweep(self, dicom, report):
        """remove or redact tags not bound to a rule"""
        for tag in list(dicom):
            if tag in self.mapped:
                continue
            try:
                self._sweep_tag(tag, dicom, report)
            except Exception as exc:
                LOGGER.error(f"Error processing unmapped tag {tag}: {exc}")
                report.failed.append(tag)

    def _sweep_tag(self, tag, dicom, report):
        vr = dicom.vr(tag)
        if is_opaque(vr):
            LOGGER.debug(f"Keep unmapped tag {tag} with VR {vr}")
            report.skipped.append(tag)
            return

        if tag == policy.PATIENT_NAME:
            dicom.set(tag, policy.DEFAULT_NAME)
            report.redacted.append(tag)
            return

        if tag in policy.ESSENTIAL_TAGS or tag in policy.ALLOWED_TAGS:
            return
        elif tag == policy.PIXEL_DATA:
            return

        LOGGER.debug(f"Remove unmapped tag {tag}")
        dicom.remove(tag)
        report.removed.append(tag)

    def ensure_required(self, dicom, report):
        """insert default values of missing required attributes"""
        for tag, value in policy.REQUIRED_DEFAULTS:
            if tag in dicom:
                continue
            try:
                dicom.set(tag, value)
            except (ValueError, TypeError) as exc:
                LOGGER.warning(f"Could not add required tag {tag}: {exc}")
                report.failed.append(tag)
                continue
            report.backfilled.append(tag)
