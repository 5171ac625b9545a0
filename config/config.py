"""配置文件"""

# 分词参数
TOKENIZER_CONFIG = {
    "implied_multiplication": True,  # 10x -> 10*x
}

# 区间采样参数
SAMPLER_CONFIG = {
    "default_resolution": 1000,  # 未给 step 时 step = (high-low)/1000
    "plot_padding": 1.0,  # 绘图时右端多采样一段，折线不会在窗口边缘断开
    "plot_step": 0.1,
}

# 二分法求根参数
SOLVER_CONFIG = {
    "iterations": 50,
    "zero_tolerance": 1e-12,  # |f(x3)| 小于此值提前停止
    "width_tolerance": 1e-12,  # 半区间宽度小于此值提前停止
    "check_bracket": False,  # 默认不检查端点异号，由调用方保证
}

# 基准测试参数
BENCH_CONFIG = {
    "target_ms": 1000,  # 每轮目标耗时
    "min_ms": 100,  # 低于此耗时的轮次不计入
    "runs": 6,
    "initial_loops": 10,
    "parse_formula": "a+b-c*d/e*(f+g-sin(h)^j)",
    "eval_formula": "2x^2+3*(x^4)/2",
}

# 命令行默认值
CLI_CONFIG = {
    "log_format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    "log_level": "WARNING",
    "default_low": -10.0,
    "default_high": 10.0,
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert SAMPLER_CONFIG["default_resolution"] > 0, "采样分辨率必须为正"
    assert SAMPLER_CONFIG["plot_step"] > 0, "绘图步长必须为正"
    assert SOLVER_CONFIG["iterations"] > 0, "迭代次数必须为正"
    assert SOLVER_CONFIG["zero_tolerance"] >= 0, "容差不能为负"
    assert SOLVER_CONFIG["width_tolerance"] >= 0, "容差不能为负"
    assert BENCH_CONFIG["min_ms"] < BENCH_CONFIG["target_ms"], "min_ms 必须小于 target_ms"
    assert CLI_CONFIG["default_low"] < CLI_CONFIG["default_high"], "默认区间为空"
    return True
