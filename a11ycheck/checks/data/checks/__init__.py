from a11ycheck.checks.data.checks.class_name import ClassNameCheck

# Check registry - all built-in checks
CHECKS = {
    ClassNameCheck.kind_name(): ClassNameCheck,
}
