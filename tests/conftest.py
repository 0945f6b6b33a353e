import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from knowledge.layout import CorpusLayout


NFT_DOC = "# SIP-009 NFT\n\nNon-fungible tokens use `nft-transfer?`.\n"
NFT_TRAIT = "(define-trait nft-trait ((transfer (uint principal principal) (response bool uint))))"
FT_DOC = "# SIP-010 FT\n\nFungible tokens use `ft-transfer?`.\n"
COST_DOC = "# SIP-012\n\nCost limits and Burn Height selection.\n"


@pytest.fixture
def corpus(tmp_path):
    """A small on-disk corpus: three SIPs, two topic groups, the book."""
    standards = tmp_path / "standards"
    (standards / "sip-009").mkdir(parents=True)
    (standards / "sip-009" / "sip-009.md").write_text(NFT_DOC)
    (standards / "sip-009" / "nft-trait.clar").write_text(NFT_TRAIT)

    (standards / "sip-010").mkdir()
    (standards / "sip-010" / "sip-010.md").write_text(FT_DOC)

    (standards / "sip-012").mkdir()
    (standards / "sip-012" / "sip-012.md").write_text(COST_DOC)

    (standards / "clarity_book.txt").write_text("THE CLARITY BOOK\n")
    (standards / "README.md").write_text("not a SIP directory")

    resources = tmp_path / "resources"
    (resources / "clarity").mkdir(parents=True)
    (resources / "clarity" / "b-security.md").write_text("Check tx-sender.")
    (resources / "clarity" / "a-basics.md").write_text("Clarity is decidable.")
    (resources / "clarity" / "notes.txt").write_text("ignored")
    (resources / "tokens").mkdir()
    (resources / "tokens" / "ft.md").write_text("Use define-fungible-token.")
    (resources / "frontend").mkdir()

    return tmp_path


@pytest.fixture
def layout(corpus):
    return CorpusLayout(
        resources_dir=str(corpus / "resources"),
        standards_dir=str(corpus / "standards"),
    )
