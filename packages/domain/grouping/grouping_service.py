"""
Grouping Service - Orchestrates one categorization run

Flow:
1. Load the listings file and validate every record
2. Group listings by product signature
3. Write the categories to the result file

A validation failure aborts the run before anything is written.

Example:
- Input: [{"title": "Arroz Branco Tio João 5kg", "supermarket": "A"},
          {"title": "arroz branco tio joao 5kg", "supermarket": "B"}]
- Output: [{"category": "Arroz Branco Tio João 5kg", "count": 2, "products": [...]}]
"""
from pathlib import Path
from typing import List, Optional, Union

import structlog

from packages.common.config import Settings, get_settings
from packages.common.schemas.product_listing import CategoryOutput
from packages.domain.grouping.grouping_engine import group_products
from packages.ingestion.category_writer import write_categories
from packages.ingestion.listing_loader import load_listings

logger = structlog.get_logger()


class GroupingService:
    """
    Runs load → group → write for a pair of files.

    Usage:
        service = GroupingService()
        categories = service.process_file("data01.json", "resultado.json")
        print(f"Categories: {len(categories)}")
    """

    def __init__(self, settings: Optional[Settings] = None):
        """
        Initialize grouping service.

        Args:
            settings: Application settings (defaults to cached environment settings)
        """
        self.settings = settings or get_settings()

    def resolve_path(self, file_name: Union[str, Path]) -> Path:
        """Resolve a file name against the current working directory"""
        return Path.cwd().joinpath(file_name).resolve()

    def process_file(
        self,
        input_file: Optional[Union[str, Path]] = None,
        output_file: Optional[Union[str, Path]] = None,
    ) -> List[CategoryOutput]:
        """
        Categorize the listings in input_file and write them to output_file.

        Args:
            input_file: Listings JSON (defaults to settings.input_file)
            output_file: Result JSON (defaults to settings.output_file)

        Returns:
            Categories in first-seen order

        Raises:
            FileNotFoundError: If the input file doesn't exist
            ListingValidationError: If the input is malformed
        """
        input_path = self.resolve_path(input_file or self.settings.input_file)
        output_path = self.resolve_path(output_file or self.settings.output_file)

        logger.info("processing_started",
                    input_path=str(input_path),
                    output_path=str(output_path))

        try:
            records = load_listings(input_path)
            categories = group_products(records)
            write_categories(output_path, categories, indent=self.settings.output_indent)
        except Exception as e:
            logger.error("processing_failed",
                         input_path=str(input_path),
                         error=str(e),
                         error_type=type(e).__name__)
            raise

        logger.info("processing_complete",
                    output_path=str(output_path),
                    listings=len(records),
                    categories=len(categories))

        return categories
