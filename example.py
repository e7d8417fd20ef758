from currency_converter import (
    ConversionRequest,
    RateTable,
    StaticRateSource,
    __version__,
    convert,
    default_rate_table,
)

print(__version__)  # 0.1.0

# Default table: USD=1, JPY=113.5, EUR=0.89, RUB=74.36, GBP=0.75
table = default_rate_table()
print(table.codes)

# Price lookups report unknown codes as None
print(table.price_of("JPY"))  # 113.5
print(table.price_of("XYZ"))  # None

# One-off conversion
result = convert(table, ConversionRequest("EUR", "JPY", 1))
print(result.describe())
# => Result: 1 EUR equals 127.5281 JPY

# A table built from another rate source
custom = RateTable.from_source(StaticRateSource({"USD": 1, "CHF": 0.92}))
print(convert(custom, ConversionRequest("CHF", "USD", 50)).converted_display)
# => 54.3478
