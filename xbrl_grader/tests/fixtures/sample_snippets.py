# Path: xbrl_grader/tests/fixtures/sample_snippets.py
"""
Sample Learner Snippets for Testing

Correct answers for every exercise plus common malformed inputs.
Tests derive wrong answers from these with str.replace so the
difference under test stays visible.
"""


# ==============================================================================
# MALFORMED INPUT
# ==============================================================================

MALFORMED_SNIPPETS = [
    '<ex:Revenue unitRef="u1">100</ex:Revenu>',
    '<a><b></a></b>',
    '<ex:Revenue unitRef="u1">100',
    'just some text',
    '',
    '   \n  ',
    '<a/> trailing text',
    '<!DOCTYPE x [<!ENTITY boom "boom">]><a>&boom;</a>',
]


# ==============================================================================
# INSTANCE SNIPPETS
# ==============================================================================

FACT_SNIPPET = '<ex:Revenue contextRef="C1" unitRef="u1" decimals="0">1000</ex:Revenue>'

DURATION_CONTEXT = """
<xbrli:context id="C1">
  <xbrli:entity>
    <xbrli:identifier scheme="http://www.example.com">EXAMPLE</xbrli:identifier>
  </xbrli:entity>
  <xbrli:period>
    <xbrli:startDate>2023-01-01</xbrli:startDate>
    <xbrli:endDate>2023-06-01</xbrli:endDate>
  </xbrli:period>
</xbrli:context>
"""

USD_UNIT = '<xbrli:unit id="u1"><xbrli:measure>iso4217:USD</xbrli:measure></xbrli:unit>'

ALL_FIXES = DURATION_CONTEXT + """
<xbrli:unit id="u1"><xbrli:measure>iso4217:EUR</xbrli:measure></xbrli:unit>
<ex:Revenue contextRef="C1" unitRef="u1" decimals="0">5000</ex:Revenue>
"""

BUSHCHAT = """
<xbrli:context id="C1">
  <xbrli:entity>
    <xbrli:identifier scheme="http://www.example.com">BUSHCHAT</xbrli:identifier>
  </xbrli:entity>
  <xbrli:period>
    <xbrli:instant>2023-12-31</xbrli:instant>
  </xbrli:period>
</xbrli:context>
<xbrli:unit id="u1"><xbrli:measure>iso4217:USD</xbrli:measure></xbrli:unit>
<ex:Assets contextRef="C1" unitRef="u1" decimals="2">1000000.50</ex:Assets>
"""

CALCULATION = """
<ex:Revenue contextRef="C1" unitRef="u1" decimals="0">100</ex:Revenue>
<ex:OtherIncome contextRef="C1" unitRef="u1" decimals="0">50</ex:OtherIncome>
<ex:TotalIncome contextRef="C1" unitRef="u1" decimals="0">150</ex:TotalIncome>
"""


# ==============================================================================
# DIMENSION SNIPPETS
# ==============================================================================

DIMENSION_USAGE = """
<xbrli:context id="C1">
  <xbrli:entity>
    <xbrli:identifier scheme="http://www.example.com">EXAMPLE</xbrli:identifier>
    <xbrli:segment>
      <xbrldi:explicitMember dimension="ex:RegionAxis">ex:AsiaMember</xbrldi:explicitMember>
    </xbrli:segment>
  </xbrli:entity>
  <xbrli:period>
    <xbrli:instant>2023-12-31</xbrli:instant>
  </xbrli:period>
</xbrli:context>
"""

DIMENSION_AND_CALCULATION = DIMENSION_USAGE + USD_UNIT + CALCULATION

BEGINNER_1 = """
<xbrli:context id="Context_A">
  <xbrli:entity>
    <xbrli:identifier scheme="http://www.example.com">EXAMPLE</xbrli:identifier>
    <xbrli:segment>
      <xbrldi:explicitMember dimension="ex:ProductAxis">ex:CarsMember</xbrldi:explicitMember>
    </xbrli:segment>
  </xbrli:entity>
  <xbrli:period>
    <xbrli:instant>2023-12-31</xbrli:instant>
  </xbrli:period>
</xbrli:context>
"""

BEGINNER_2 = """
<xbrli:context id="Context_B">
  <xbrli:entity>
    <xbrli:identifier scheme="http://www.example.com">EXAMPLE</xbrli:identifier>
    <xbrli:segment>
      <xbrldi:explicitMember dimension="ex:LocationAxis">ex:SouthMember</xbrldi:explicitMember>
    </xbrli:segment>
  </xbrli:entity>
  <xbrli:period>
    <xbrli:instant>2023-12-31</xbrli:instant>
  </xbrli:period>
</xbrli:context>
"""

INTERMEDIATE_1 = """
<xbrli:context id="Region_2023">
  <xbrli:entity>
    <xbrli:identifier scheme="http://www.example.com">EXAMPLE</xbrli:identifier>
    <xbrli:segment>
      <xbrldi:explicitMember dimension="ex:RegionAxis">ex:EuropeMember</xbrldi:explicitMember>
    </xbrli:segment>
  </xbrli:entity>
  <xbrli:period>
    <xbrli:instant>2023-12-31</xbrli:instant>
  </xbrli:period>
</xbrli:context>
"""

INTERMEDIATE_2 = """
<xbrli:context id="C1">
  <xbrli:entity>
    <xbrli:identifier scheme="http://www.example.com">EXAMPLE</xbrli:identifier>
    <xbrli:segment>
      <xbrldi:typedMember dimension="ex:ProductAxis">
        <ex:product>Laptop</ex:product>
      </xbrldi:typedMember>
    </xbrli:segment>
  </xbrli:entity>
  <xbrli:period>
    <xbrli:instant>2023-12-31</xbrli:instant>
  </xbrli:period>
</xbrli:context>
"""

ADVANCED_1 = """
<xbrli:context id="C1">
  <xbrli:entity>
    <xbrli:identifier scheme="http://www.example.com">EXAMPLE</xbrli:identifier>
    <xbrli:segment>
      <xbrldi:explicitMember dimension="ex:RegionAxis">ex:AsiaMember</xbrldi:explicitMember>
    </xbrli:segment>
  </xbrli:entity>
  <xbrli:period>
    <xbrli:instant>2023-12-31</xbrli:instant>
  </xbrli:period>
  <xbrli:scenario>
    <xbrldi:explicitMember dimension="ex:ProductAxis">ex:ElectronicsMember</xbrldi:explicitMember>
  </xbrli:scenario>
</xbrli:context>
"""

REGION_MEMBER = '<xbrldi:explicitMember dimension="ex:RegionAxis">ex:AsiaMember</xbrldi:explicitMember>'
PRODUCT_MEMBER = (
    '<xbrldi:explicitMember dimension="ex:ProductAxis">ex:ElectronicsMember</xbrldi:explicitMember>'
)


# ==============================================================================
# LINKBASE SNIPPETS
# ==============================================================================

TERSE_LABEL = (
    '<link:label xlink:type="resource" xlink:label="lab_revenue_terse" '
    'xlink:role="http://www.xbrl.org/2003/role/terseLabel" xml:lang="en">Revenue</link:label>'
)

LABEL_ARC = (
    '<link:labelArc xlink:type="arc" '
    'xlink:arcrole="http://www.xbrl.org/2003/arcrole/concept-label" '
    'xlink:from="loc_revenue" xlink:to="lab_revenue_terse"/>'
)

SALARIES_ARC = (
    '<link:presentationArc xlink:type="arc" '
    'xlink:arcrole="http://www.xbrl.org/2003/arcrole/parent-child" '
    'xlink:from="loc_TotalOperatingExpenses" xlink:to="loc_SalariesAndWages" order="10"/>'
)

RENT_ARC = (
    '<link:presentationArc xlink:type="arc" '
    'xlink:arcrole="http://www.xbrl.org/2003/arcrole/parent-child" '
    'xlink:from="loc_TotalOperatingExpenses" xlink:to="loc_RentExpense" order="20"/>'
)

PRESENTATION_PART_2 = SALARIES_ARC + '\n' + RENT_ARC

REVENUE_CALCULATION_ARC = (
    '<link:calculationArc xlink:type="arc" '
    'xlink:arcrole="http://www.xbrl.org/2003/arcrole/summation-item" '
    'xlink:from="loc_NetIncome" xlink:to="loc_Revenue" weight="1"/>'
)

COGS_CALCULATION_ARC = (
    '<link:calculationArc xlink:type="arc" '
    'xlink:arcrole="http://www.xbrl.org/2003/arcrole/summation-item" '
    'xlink:from="loc_NetIncome" xlink:to="loc_CostOfGoodsSold" weight="-1"/>'
)

CALCULATION_PART_2 = REVENUE_CALCULATION_ARC + '\n' + COGS_CALCULATION_ARC

DOMAIN_MEMBER_ARC = (
    '<link:definitionArc xlink:type="arc" '
    'xlink:arcrole="http://xbrl.org/2005/arcrole/domain-member" '
    'xlink:from="loc_GeoRegionAxis" xlink:to="loc_EuropeMember"/>'
)

REFERENCE_LINK = """
<link:reference xlink:type="resource" xlink:label="ref_revenue"
                xlink:role="http://www.xbrl.org/2003/role/reference">
  <ref:Standard>IFRS 15</ref:Standard>
  <ref:Paragraph>10</ref:Paragraph>
</link:reference>
<link:referenceArc xlink:type="arc"
                   xlink:arcrole="http://www.xbrl.org/2003/arcrole/concept-reference"
                   xlink:from="loc_Revenue" xlink:to="ref_revenue"/>
"""


# ==============================================================================
# CORRECT ANSWER PER VALIDATOR
# ==============================================================================

VALID_ANSWERS = {
    'validateUnitRefAnswer': FACT_SNIPPET,
    'validateContextRefAnswer': FACT_SNIPPET,
    'validateDateRangeAnswer': DURATION_CONTEXT,
    'validateCurrencyCodeAnswer': USD_UNIT,
    'validateRevenueValueAnswer': FACT_SNIPPET,
    'validateAllFixesAnswer': ALL_FIXES,
    'validateBushchatHandsOnSnippet': BUSHCHAT,
    'validateInstantDate': BUSHCHAT,
    'validateCurrencyFormat': USD_UNIT,
    'validateDecimalsPrecision': BUSHCHAT,
    'validateDecimalsFormat': CALCULATION,
    'validateContextRefIntegrity': BUSHCHAT,
    'validateDimensionUsage': DIMENSION_USAGE,
    'validateCalculation': CALCULATION,
    'validateDimensionAndCalculation': DIMENSION_AND_CALCULATION,
    'validateBeginner1': BEGINNER_1,
    'validateBeginner2': BEGINNER_2,
    'validateIntermediate1': INTERMEDIATE_1,
    'validateIntermediate2': INTERMEDIATE_2,
    'validateAdvanced1': ADVANCED_1,
    'validateLabelPart1': TERSE_LABEL,
    'validateLabelPart2': LABEL_ARC,
    'validatePresentationPart1': SALARIES_ARC,
    'validatePresentationPart2': PRESENTATION_PART_2,
    'validateCalculationPart1': REVENUE_CALCULATION_ARC,
    'validateCalculationPart2': CALCULATION_PART_2,
    'validateDefinitionDomainMember': DOMAIN_MEMBER_ARC,
    'validateReferencePart1': REFERENCE_LINK,
}
