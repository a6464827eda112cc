from repostwatch.judgment.base import BaseJudgmentGateway
from repostwatch.judgment.factory import JudgmentGatewayFactory
from repostwatch.judgment.gateway import JudgmentGateway
from repostwatch.judgment.reply_parser import ReplyParser

__all__ = ["BaseJudgmentGateway", "JudgmentGateway", "JudgmentGatewayFactory", "ReplyParser"]
