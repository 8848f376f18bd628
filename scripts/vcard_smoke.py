import argparse
import logging
import sys

from vcardkit.client import capability_from_user_agent
from vcardkit.contact import VCard

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Build a vCard and print it (or save it).")
    parser.add_argument("last_name")
    parser.add_argument("first_name")
    parser.add_argument("--email")
    parser.add_argument("--phone")
    parser.add_argument("--company")
    parser.add_argument("--photo", help="image path or URL, embedded in the card")
    parser.add_argument("--user-agent", help="client User-Agent, selects .vcf or .ics")
    parser.add_argument("--out", help="directory to save the file into")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s [%(name)s] %(message)s")

    card = VCard()
    card.add_name(args.last_name, args.first_name)
    if args.email:
        card.add_email(args.email)
    if args.phone:
        card.add_phone_number(args.phone, "CELL")
    if args.company:
        card.add_company(args.company)
    if args.photo and not card.add_photo(args.photo):
        print(f"Photo skipped: {args.photo}", file=sys.stderr)

    client = capability_from_user_agent(args.user_agent)
    if args.out:
        print("Saved:", card.save(args.out, client))
    else:
        sys.stdout.write(card.get_output(client))
