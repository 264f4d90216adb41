# run_from_json.py

import json
import sys

from mathdocx import load_config
from mathdocx.docx_adapter import build_formula_document

# Input and output file names
INPUT_JSON_FILE = 'data/formulas.json'
OUTPUT_DOCX_FILE = 'output_formulas.docx'


def main():
    """
    Builds a Word document from a local JSON list of formulas.
    """
    input_file = sys.argv[1] if len(sys.argv) > 1 else INPUT_JSON_FILE
    print(f"📄 Reading formulas from '{input_file}'...")

    try:
        with open(input_file, 'r', encoding='utf-8') as f:
            entries = json.load(f)
    except (FileNotFoundError, json.JSONDecodeError) as e:
        print(f"Error: could not read or parse the JSON file -> {e}")
        return

    config = load_config()
    print(f"⚙️ Converting {len(entries)} formulas...")
    document_object = build_formula_document(entries, config=config)

    document_object.save(OUTPUT_DOCX_FILE)
    print(f"🎉 Document saved as '{OUTPUT_DOCX_FILE}'!")


if __name__ == "__main__":
    main()
