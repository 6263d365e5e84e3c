"""core/calculator.py - shunt + evaluate 的组合入口，带后缀序列缓存"""
import logging
from collections import OrderedDict

from core.shunting_yard import shunt
from core.rpn_evaluator import RPNEvaluator

logger = logging.getLogger(__name__)


class Calculator:

    def __init__(self, cache_size=256):
        self.cache_size = cache_size
        # 使用有限大小的OrderedDict实现LRU缓存；Token不可变，缓存的序列可以安全复用
        self._postfix_cache = OrderedDict()
        self._cache_hits = 0
        self._cache_misses = 0

    @staticmethod
    def _generate_cache_key(expression):
        # shunt 忽略空白，去掉空白后等价的表达式共用一个条目
        return ''.join(expression.split())

    def _manage_cache(self):
        """管理缓存大小"""
        while len(self._postfix_cache) > self.cache_size:
            self._postfix_cache.popitem(last=False)

    def clear_cache(self):
        """清空缓存（供外部调用）"""
        self._postfix_cache.clear()
        logger.info(f"Cache cleared. Hits: {self._cache_hits}, Misses: {self._cache_misses}")
        self._cache_hits = 0
        self._cache_misses = 0

    @property
    def cache_info(self):
        return {
            'hits': self._cache_hits,
            'misses': self._cache_misses,
            'size': len(self._postfix_cache),
            'max_size': self.cache_size,
        }

    def to_postfix(self, expression):
        """
        中缀表达式 -> 后缀Token元组
        语法错误不缓存，直接向上抛出
        """
        cache_key = self._generate_cache_key(expression)

        if cache_key in self._postfix_cache:
            # 移到末尾（最近使用）
            self._postfix_cache.move_to_end(cache_key)
            self._cache_hits += 1
            logger.debug(f"Cache hit for expression: {expression[:50]}")
            return self._postfix_cache[cache_key]

        self._cache_misses += 1
        postfix = tuple(shunt(expression))
        if self.cache_size > 0:
            self._postfix_cache[cache_key] = postfix
            self._manage_cache()
        return postfix

    def evaluate(self, expression):
        """计算中缀表达式的值"""
        return RPNEvaluator.evaluate(self.to_postfix(expression))
