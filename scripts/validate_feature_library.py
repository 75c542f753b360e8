"""Script to validate a complex feature configuration file without building the features."""
import argparse
import logging
import sys
from typing import List

from complex_features.core.config import LibraryConfig
from complex_features.core.config_loader import parse
from complex_features.core.errors import ComplexFeatureError
from complex_features.features.factory import get_feature_class


def validate_feature_file(path: str, encoding: str = "utf-8") -> List[str]:
    """Check that the file parses and every implementation id resolves to a feature type."""
    errors = []
    try:
        entries = parse(path, encoding=encoding)
    except ComplexFeatureError as e:
        return [str(e)]

    for entry in entries:
        try:
            get_feature_class(entry.implementation_id)
        except ComplexFeatureError as e:
            errors.append(f"{entry.functor}: {e}")
    return errors


def main():
    """Main validation function."""
    config = LibraryConfig()
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("path", nargs="?", default=config.properties_path,
                        help="properties or YAML file (default: $COMPLEX_FEATURES_PROPERTIES)")
    args = parser.parse_args()

    logging.basicConfig(level=config.log_level)

    if not args.path:
        print("No complex feature configuration given.", file=sys.stderr)
        sys.exit(2)

    errors = validate_feature_file(args.path, encoding=config.encoding)
    if errors:
        print("\nValidation failed with the following errors:", file=sys.stderr)
        for error in errors:
            print(f"- {error}", file=sys.stderr)
        sys.exit(1)
    else:
        print("Complex feature configuration validation passed!")
        sys.exit(0)

if __name__ == "__main__":
    main()
