#!/usr/bin/env python3
"""
Render the C23 railroad diagrams into a static HTML page.
"""

import argparse
import sys
from pathlib import Path

from tqdm import tqdm

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from c23_railroad.utils.config import Config
from c23_railroad.utils.config_validation import validate_config
from c23_railroad.utils.logging import run_name_for, setup_logging
from c23_railroad.grammar import build_registry, unresolved_references
from c23_railroad.grammar.sections import SECTION_ORDER, filter_rule_names, get_section
from c23_railroad.rendering import DEFAULT_STRATEGIES, DiagramRenderer, build_document, write_html


def parse_args():
    parser = argparse.ArgumentParser(description="Render C23 railroad diagrams to HTML")
    parser.add_argument(
        "--config",
        type=str,
        default="configs/render_config.yml",
        help="Path to configuration file"
    )
    parser.add_argument(
        "--output",
        type=str,
        help="Override output HTML path"
    )
    parser.add_argument(
        "--filter",
        type=str,
        help="Only render rules whose name contains this text (case-insensitive)"
    )
    parser.add_argument(
        "--sections",
        nargs="+",
        help="Sections to render (default: all configured sections)"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        help="Override logging level"
    )
    return parser.parse_args()


def main():
    args = parse_args()

    # Load configuration
    config = Config(args.config)

    # Override with command line arguments
    if args.output:
        config.set('output.html_path', args.output)
    if args.filter is not None:
        config.set('render.filter', args.filter)
    if args.sections:
        config.set('render.sections', args.sections)
    if args.log_level:
        config.set('logging.level', args.log_level)

    validate_config(config)

    logger = setup_logging(
        log_dir=config.get('output.logs_dir', 'logs'),
        log_level=config.get('logging.level', 'INFO'),
        log_to_file=config.get('logging.to_file', False),
        run_name=run_name_for(config.get('output.html_path'))
    )

    query = config.get('render.filter', '')
    sections = [get_section(s) for s in config.get('render.sections', list(SECTION_ORDER))]

    registry = build_registry()
    logger.info(f"Registered {len(registry)} rules")
    missing = unresolved_references(registry)
    logger.debug(f"{len(missing)} rules reference names without a diagram")
    for name, refs in missing.items():
        logger.debug(f"  {name}: {', '.join(refs)}")

    renderer = DiagramRenderer(
        registry,
        link_references=config.get('render.link_references', True),
        strategies=config.get('render.strategies', list(DEFAULT_STRATEGIES))
    )

    try:
        root = build_document(sections)
        rendered = 0
        for section in tqdm(sections, desc="Rendering sections"):
            names = filter_rule_names(section.rule_names, query)
            renderer.render_section(root, section, names)
            rendered += len(names)
        logger.info(f"Rendered {rendered} rules" + (f" matching '{query}'" if query.strip() else ""))

        write_html(root, config.get('output.html_path'), config.get('render.title', 'C23 Railroad Diagrams'))
    except Exception as e:
        logger.error(f"Rendering failed: {e}", exc_info=True)
        raise


if __name__ == "__main__":
    main()
