"""Platform fee constants: the one place these numbers live.

Rates are fractions of the sale subtotal (item + shipping). The seller rate is
all-in: the payment processor's cut comes out of it, the remainder is ours.
"""

from src.cm_fees.domain.models import TradeFeeTier

# Current default (intro) rate charged to sellers, processor fee included
INTRO_SELLER_FEE_RATE = 0.065
# Local pickup sales carry no seller fee
LOCAL_PICKUP_FEE_RATE = 0.0

DEFAULT_MARKETPLACE_FEE_RATE = INTRO_SELLER_FEE_RATE

# Payment processor estimate: 2.9% + 30 cents
PROCESSOR_PERCENTAGE_FEE = 0.029
PROCESSOR_FIXED_FEE_CENTS = 30

# Flat fee charged to buyers at checkout
BUYER_PROTECTION_FEE_CENTS = 199

# Influencer discounts replace this rate, not the seller's all-in rate
DISCOUNT_BASE_FEE_RATE = 0.05
DISCOUNT_MIN_FEE_CENTS = 500

# Trade fees in whole dollars by combined trade value (item_a + item_b)
TRADE_FEE_TIERS: tuple[TradeFeeTier, ...] = (
    TradeFeeTier(min=0, max=50, total=2, each=1),
    TradeFeeTier(min=51, max=100, total=5, each=2.5),
    TradeFeeTier(min=101, max=250, total=12, each=6),
    TradeFeeTier(min=251, max=500, total=22, each=11),
    TradeFeeTier(min=501, max=1000, total=35, each=17.5),
    TradeFeeTier(min=1001, max=2000, total=45, each=22.5),
    TradeFeeTier(min=2001, max=4000, total=55, each=27.5),
    TradeFeeTier(min=4001, max=5000, total=60, each=30),
    TradeFeeTier(min=5001, max=10000, total=200, each=100),
    TradeFeeTier(min=10001, max=None, total=200, each=100),
)
