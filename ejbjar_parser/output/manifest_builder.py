"""Class-file manifest report builder."""

from datetime import datetime, timezone
from typing import Any

from ejbjar_parser.domain.models import DescriptorResult, ParseError

PARSER_VERSION = '1.0.0'


class ManifestBuilder:
    """Builds the JSON-ready manifest report for a batch of descriptors."""

    @staticmethod
    def build(
        results: list[DescriptorResult],
        errors: list[ParseError],
        parse_duration: float = 0.0,
    ) -> dict[str, Any]:
        descriptors = []
        all_files: dict[str, str] = {}
        for result in results:
            descriptors.append({
                'descriptor': result.descriptor,
                'ejb_name': result.ejb_name,
                'public_id': result.public_id,
                'file_count': len(result.manifest),
                'files': dict(sorted(result.manifest.items())),
            })
            all_files.update(result.manifest)

        return {
            '_metadata': {
                'parser_version': PARSER_VERSION,
                'generated_at': datetime.now(timezone.utc).isoformat(),
                'parse_duration_seconds': round(parse_duration, 2),
            },
            'summary': {
                'total_descriptors': len(results) + len(errors),
                'total_parsed': len(results),
                'total_errors': len(errors),
                'total_files': len(all_files),
            },
            'descriptors': descriptors,
        }
