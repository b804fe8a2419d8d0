"""Console summary of the extracted model."""

from ..core.extractor import ExtractionResult
from ..utils.colors import Colors


class ConsoleReporter:
    """Print extraction results to the terminal."""

    @staticmethod
    def print_summary(result: ExtractionResult, show_details: bool = False, limit: int = 20):
        """
        Print per-table counts, and optionally the generated accessors.

        Args:
            result: Extraction result
            show_details: List accessors of each table
            limit: Max accessors listed per table
        """
        print("\n" + "=" * 70)
        print(f"{Colors.bold('LOCALIZED STRINGS')}")
        print("=" * 70)

        if not result.tables:
            print("No strings found")
            return

        print(f"{'Table':<30} {'Strings':<10} {'Properties':<12} {'Functions':<10}")
        print("-" * 70)

        for table, accessors in result.tables.items():
            functions = sum(1 for accessor in accessors if accessor.is_function)
            print(f"{table:<30} {len(accessors):<10} {len(accessors) - functions:<12} {functions:<10}")

            if show_details:
                ConsoleReporter._print_accessors(accessors, limit)

        print("-" * 70)
        print(f"Total: {Colors.bold(str(result.total_strings))} strings "
              f"({result.property_count} properties, {result.function_count} functions)")

    @staticmethod
    def _print_accessors(accessors: list, limit: int):
        for accessor in accessors[:limit]:
            if accessor.is_function:
                params = ', '.join(
                    f"{label}: {argument.kind.host_type}"
                    for label, argument in zip(accessor.parameter_labels, accessor.entry.arguments)
                )
                print(f"   {Colors.info(accessor.identifier)}({params})")
            else:
                print(f"   {Colors.info(accessor.identifier)}")

        if len(accessors) > limit:
            print(f"   ... and {len(accessors) - limit} more")
