"""
Strategy-tagged deal analysis records.

A deal record embeds one analysis per strategy. The ``strategy`` tag is only
needed where a caller wants to recompute "whatever this analysis is"; the
calculators themselves take their own typed inputs.
"""

from typing import Annotated, Literal, Union

from pydantic import Field

from deal_analyzer.schemas.base import CamelModel
from deal_analyzer.schemas.brrrr import BrrrrInputs
from deal_analyzer.schemas.rental import Financials
from deal_analyzer.schemas.seller_financing import SellerFinancingInputs
from deal_analyzer.schemas.subject_to import SubjectToInputs
from deal_analyzer.schemas.wholesale import WholesaleInputs

Strategy = Literal["Rental", "Wholesale", "Subject-To", "Seller Financing", "BRRRR"]


class RentalAnalysis(CamelModel):
    strategy: Literal["Rental"] = "Rental"
    inputs: Financials


class WholesaleAnalysis(CamelModel):
    strategy: Literal["Wholesale"] = "Wholesale"
    inputs: WholesaleInputs


class SubjectToAnalysis(CamelModel):
    strategy: Literal["Subject-To"] = "Subject-To"
    inputs: SubjectToInputs


class SellerFinancingAnalysis(CamelModel):
    strategy: Literal["Seller Financing"] = "Seller Financing"
    inputs: SellerFinancingInputs


class BrrrrAnalysis(CamelModel):
    strategy: Literal["BRRRR"] = "BRRRR"
    inputs: BrrrrInputs


DealAnalysis = Annotated[
    Union[
        RentalAnalysis,
        WholesaleAnalysis,
        SubjectToAnalysis,
        SellerFinancingAnalysis,
        BrrrrAnalysis,
    ],
    Field(discriminator="strategy"),
]
