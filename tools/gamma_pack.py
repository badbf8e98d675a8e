import argparse
import json

import dacite

from gamma_code import PackConfig, pack_file, unpack_file


def main(config: PackConfig, unpack: bool = False):
    """
    Pack JSON file of integer sequences into gamma codes
    or unpack it back, depending on `unpack`

    """
    if unpack:
        print(f"Unpacking {config.input_path}")
        count = unpack_file(config)
    else:
        print(f"Packing {config.input_path}")
        count = pack_file(config)
    print(f"{count} sequences saved to {config.output_path}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(
        "Gamma code packing"
    )
    parser.add_argument(
        "--config", type=str, required=True,
        help="Path to packing .json config"
    )
    parser.add_argument(
        "--unpack", action="store_true",
        help="Decode packed file instead of encoding"
    )
    args = parser.parse_args()

    with open(args.config) as f:
        config_json = json.load(f)

    config = dacite.from_dict(PackConfig, config_json)

    main(config, unpack=args.unpack)
